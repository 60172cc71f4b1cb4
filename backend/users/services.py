import logging

from django.db import transaction
from django.utils import timezone
from rest_framework_simplejwt.tokens import AccessToken

from core_backend.base.results import failure, success
from notifications.services import email_service
from .models import User, Verification

logger = logging.getLogger(__name__)


class UserService:
    """
    Account lifecycle: sign-up, login, profile edits and email verification.

    Every method returns a result dict (``ok`` / ``error``); unexpected errors
    are logged and reported with a generic message.
    """

    @staticmethod
    def create_account(email: str, password: str, role: str) -> dict:
        try:
            with transaction.atomic():
                if User.objects.filter(email__iexact=email).exists():
                    return failure("There is a user with that email already")

                user = User.objects.create_user(email=email, password=password, role=role)
                verification = Verification.objects.create(user=user)

            email_service.send_verification_email(user.email, verification.code)
            logger.info(f"Account created for user {user.id} ({user.role})")
            return success()
        except Exception:
            logger.exception("Account creation failed")
            return failure("Couldn't create user")

    @staticmethod
    def login(email: str, password: str) -> dict:
        try:
            user = User.objects.filter(email__iexact=email).first()
            if user is None:
                return failure("User not found.")

            if not user.check_password(password):
                return failure("Wrong password")

            user.last_login = timezone.now()
            user.save(update_fields=["last_login", "updated_at"])

            return success(token=UserService.generate_token(user))
        except Exception:
            logger.exception("Login failed")
            return failure("Can't log user in.")

    @staticmethod
    def generate_token(user: User) -> str:
        """Signed access token keyed on the user's id."""
        return str(AccessToken.for_user(user))

    @staticmethod
    def find_by_id(user_id) -> dict:
        try:
            return success(user=User.objects.get(pk=user_id))
        except (User.DoesNotExist, ValueError, TypeError):
            return failure("User Not Found")

    @staticmethod
    def edit_profile(user_id, email: str = None, password: str = None) -> dict:
        """
        Update email and/or password. A new email drops the verified flag and
        issues a fresh verification code; a new password is hashed on save.
        """
        try:
            verification = None
            with transaction.atomic():
                user = User.objects.get(pk=user_id)

                if email:
                    user.email = User.objects.normalize_email(email)
                    user.verified = False

                if password:
                    user.set_raw_password(password)

                user.save()

                if email:
                    Verification.objects.filter(user=user).delete()
                    verification = Verification.objects.create(user=user)

            if verification is not None:
                email_service.send_verification_email(user.email, verification.code)

            return success()
        except Exception:
            logger.exception(f"Profile update failed for user {user_id}")
            return failure("Could not update profile")

    @staticmethod
    def verify_email(code: str) -> dict:
        try:
            with transaction.atomic():
                verification = (
                    Verification.objects.select_related("user").filter(code=code).first()
                )
                if verification is None:
                    return failure("Verification not found.")

                user = verification.user
                user.verified = True
                user.save(update_fields=["verified", "updated_at"])
                verification.delete()

            logger.info(f"Email verified for user {user.id}")
            return success()
        except Exception:
            logger.exception("Email verification failed")
            return failure("Could not verify email.")
