from rest_framework import serializers

from core_backend.base import TimestampedSerializer
from .models import Order, OrderItem


class OrderItemOptionSerializer(serializers.Serializer):
    name = serializers.CharField()
    choice = serializers.CharField(required=False)


class OrderItemSerializer(TimestampedSerializer):
    class Meta:
        model = OrderItem
        fields = ["id", "dish", "options", "created_at", "updated_at"]


class OrderSerializer(TimestampedSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "status",
            "total",
            "customer",
            "driver",
            "restaurant",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CreateOrderItemSerializer(serializers.Serializer):
    dish_id = serializers.IntegerField()
    options = OrderItemOptionSerializer(many=True, required=False, default=list)


class CreateOrderSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField()
    items = CreateOrderItemSerializer(many=True, allow_empty=False)


class OrderStatusFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.OrderStatus.choices, required=False)


class EditOrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.OrderStatus.choices)
