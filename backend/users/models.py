import logging
import uuid

from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)
from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.models import CoreModel
from .exceptions import PasswordHashingError

logger = logging.getLogger(__name__)


class UserManager(BaseUserManager):
    use_in_migrations = True

    def create_user(self, email, password=None, role=None, **extra_fields):
        if not email:
            raise ValueError("Email is required")

        user = self.model(
            email=self.normalize_email(email),
            role=role or self.model.Role.CLIENT,
            **extra_fields,
        )
        if password:
            user.set_raw_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("verified", True)
        return self.create_user(email, password, role=self.model.Role.OWNER, **extra_fields)


class User(CoreModel, AbstractBaseUser, PermissionsMixin):
    class Role(models.TextChoices):
        CLIENT = "CLIENT", _("Client")
        OWNER = "OWNER", _("Owner")
        DELIVERY = "DELIVERY", _("Delivery")

    email = models.EmailField(_("email address"), unique=True)
    role = models.CharField(
        _("role"), max_length=20, choices=Role.choices, default=Role.CLIENT
    )
    verified = models.BooleanField(
        _("verified"),
        default=False,
        help_text=_("Designates whether the user confirmed their email address."),
    )
    is_active = models.BooleanField(_("active"), default=True)
    is_staff = models.BooleanField(
        _("staff status"),
        default=False,
        help_text=_("Designates whether the user can log into this admin site."),
    )

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        indexes = [
            models.Index(fields=["role"], name="users_user_role_idx"),
        ]

    def __str__(self):
        return self.email

    _raw_password = None

    def set_raw_password(self, raw_password):
        """Queue a plaintext password; it is hashed by the next save()."""
        self._raw_password = raw_password

    def save(self, *args, **kwargs):
        self.hash_password()
        super().save(*args, **kwargs)

    def hash_password(self):
        """
        Replace a pending plaintext password with its hash. Only values set
        through set_raw_password() are hashed, whatever they look like.
        """
        if self._raw_password is None:
            return

        try:
            self.set_password(self._raw_password)
        except Exception as exc:
            logger.exception("Password hashing failed for user %s", self.pk)
            raise PasswordHashingError("Could not hash password") from exc
        self._raw_password = None

    def check_password(self, raw_password):
        """Compare a plaintext candidate against the stored hash."""
        try:
            return super().check_password(raw_password)
        except Exception as exc:
            logger.exception("Password check failed for user %s", self.pk)
            raise PasswordHashingError("Could not check password") from exc


def generate_verification_code():
    return uuid.uuid4().hex


class Verification(CoreModel):
    """One-time email confirmation code, consumed on use."""

    code = models.CharField(
        max_length=64, unique=True, default=generate_verification_code, editable=False
    )
    user = models.OneToOneField(
        User, on_delete=models.CASCADE, related_name="verification"
    )

    def __str__(self):
        return f"Verification for {self.user_id}"
