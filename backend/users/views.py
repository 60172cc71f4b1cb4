from rest_framework import permissions

from core_backend.base import BaseAPIView
from .serializers import (
    CreateAccountSerializer,
    EditProfileSerializer,
    LoginSerializer,
    UserSerializer,
    VerifyEmailSerializer,
)
from .services import UserService


class CreateAccountView(BaseAPIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = CreateAccountSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(UserService.create_account(**serializer.validated_data))


class LoginView(BaseAPIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(UserService.login(**serializer.validated_data))


class CurrentUserView(BaseAPIView):
    """The authenticated user's own profile."""

    def get(self, request):
        return self.respond(
            UserService.find_by_id(request.user.pk),
            payload_serializers={"user": (UserSerializer, False)},
        )

    def patch(self, request):
        serializer = EditProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            UserService.edit_profile(request.user.pk, **serializer.validated_data)
        )


class UserProfileView(BaseAPIView):
    def get(self, request, pk):
        return self.respond(
            UserService.find_by_id(pk),
            payload_serializers={"user": (UserSerializer, False)},
        )


class VerifyEmailView(BaseAPIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = VerifyEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(UserService.verify_email(serializer.validated_data["code"]))
