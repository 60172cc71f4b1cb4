from core_backend.base import BaseAPIView
from users.models import User
from users.permissions import HasRole
from .serializers import (
    CreateOrderSerializer,
    EditOrderStatusSerializer,
    OrderSerializer,
    OrderStatusFilterSerializer,
)
from .services import OrderService


class OrderListView(BaseAPIView):
    permission_classes = [HasRole]
    allowed_roles = {"POST": [User.Role.CLIENT]}

    def get(self, request):
        params = OrderStatusFilterSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return self.respond(
            OrderService.get_orders(request.user, params.validated_data.get("status")),
            payload_serializers={"orders": (OrderSerializer, True)},
        )

    def post(self, request):
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            OrderService.create_order(
                request.user,
                serializer.validated_data["restaurant_id"],
                serializer.validated_data["items"],
            )
        )


class OrderDetailView(BaseAPIView):
    permission_classes = [HasRole]

    def get(self, request, pk):
        return self.respond(
            OrderService.get_order(request.user, pk),
            payload_serializers={"order": (OrderSerializer, False)},
        )

    def patch(self, request, pk):
        serializer = EditOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            OrderService.edit_order_status(request.user, pk, serializer.validated_data["status"])
        )


class TakeOrderView(BaseAPIView):
    permission_classes = [HasRole]
    allowed_roles = [User.Role.DELIVERY]

    def post(self, request, pk):
        return self.respond(OrderService.take_order(request.user, pk))
