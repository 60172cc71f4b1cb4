from django.urls import path
from .views import OrderDetailView, OrderListView, TakeOrderView

app_name = "orders"

urlpatterns = [
    path("", OrderListView.as_view(), name="order-list"),
    path("<int:pk>/", OrderDetailView.as_view(), name="order-detail"),
    path("<int:pk>/take/", TakeOrderView.as_view(), name="order-take"),
]
