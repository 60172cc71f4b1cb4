from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken


class HeaderJWTAuthentication(JWTAuthentication):
    """
    Reads the access token from the ``x-jwt`` request header.

    The header may carry the bare token or the usual ``Bearer <token>`` form.
    Requests without the header are treated as anonymous.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token

    def get_raw_token(self, header):
        parts = header.split()
        if not parts:
            return None

        if len(parts) == 1:
            return parts[0]

        if len(parts) == 2 and parts[0].lower() == b"bearer":
            return parts[1]

        raise AuthenticationFailed(
            "Authorization header must contain one space-delimited value",
            code="bad_authorization_header",
        )

    def get_user(self, validated_token):
        User = get_user_model()

        try:
            user_id = validated_token[settings.SIMPLE_JWT.get("USER_ID_CLAIM", "id")]
        except KeyError:
            raise InvalidToken("Token contained no recognizable user identification")

        try:
            user = User.objects.get(**{settings.SIMPLE_JWT.get("USER_ID_FIELD", "id"): user_id})
        except User.DoesNotExist:
            raise AuthenticationFailed("User not found", code="user_not_found")

        if not user.is_active:
            raise AuthenticationFailed("User is inactive", code="user_inactive")

        return user
