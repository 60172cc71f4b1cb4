from core_backend.base import BaseAPIView
from users.models import User
from users.permissions import HasRole
from .serializers import CreatePaymentSerializer, PaymentSerializer
from .services import PaymentService


class PaymentListView(BaseAPIView):
    permission_classes = [HasRole]
    allowed_roles = [User.Role.OWNER]

    def get(self, request):
        return self.respond(
            PaymentService.get_payments(request.user),
            payload_serializers={"payments": (PaymentSerializer, True)},
        )

    def post(self, request):
        serializer = CreatePaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            PaymentService.create_payment(request.user, **serializer.validated_data)
        )
