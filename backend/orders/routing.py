from django.urls import path

from . import consumers

websocket_urlpatterns = [
    path("ws/orders/pending/", consumers.PendingOrdersConsumer.as_asgi()),
    path("ws/orders/cooked/", consumers.CookedOrdersConsumer.as_asgi()),
    path("ws/orders/<int:order_id>/", consumers.OrderUpdatesConsumer.as_asgi()),
]
