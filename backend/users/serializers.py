from rest_framework import serializers

from core_backend.base import TimestampedSerializer
from .models import User


class UserSerializer(TimestampedSerializer):
    """Public user representation. The password hash never leaves the server."""

    class Meta:
        model = User
        fields = ["id", "email", "role", "verified", "created_at", "updated_at"]
        read_only_fields = fields


class CreateAccountSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    role = serializers.ChoiceField(choices=User.Role.choices)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class EditProfileSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False)
    password = serializers.CharField(
        write_only=True, required=False, trim_whitespace=False
    )

    def validate(self, data):
        if not data.get("email") and not data.get("password"):
            raise serializers.ValidationError("Provide an email or a password to change.")
        return data


class VerifyEmailSerializer(serializers.Serializer):
    code = serializers.CharField()
