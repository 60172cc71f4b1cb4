from rest_framework import serializers

from core_backend.base import TimestampedSerializer
from .models import Payment


class PaymentSerializer(TimestampedSerializer):
    class Meta:
        model = Payment
        fields = ["id", "transaction_id", "restaurant", "user", "created_at", "updated_at"]
        read_only_fields = fields


class CreatePaymentSerializer(serializers.Serializer):
    transaction_id = serializers.CharField(max_length=255)
    restaurant_id = serializers.IntegerField()
