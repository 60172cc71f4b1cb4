from django.conf import settings
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.models import CoreModel


def slugify_category_name(name: str) -> str:
    """'  Fast Food ' -> 'fast-food'"""
    return name.strip().lower().replace(" ", "-")


class Category(CoreModel):
    name = models.CharField(
        max_length=100, unique=True, help_text=_("Name of the restaurant category.")
    )
    slug = models.SlugField(max_length=120, unique=True)
    cover_image = models.URLField(max_length=500, null=True, blank=True)

    class Meta:
        verbose_name_plural = "categories"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Restaurant(CoreModel):
    name = models.CharField(
        max_length=255, unique=True, validators=[MinLengthValidator(5)]
    )
    address = models.CharField(max_length=255)
    cover_image = models.URLField(max_length=500, null=True, blank=True)
    is_promoted = models.BooleanField(default=False)
    promoted_until = models.DateTimeField(null=True, blank=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="restaurants",
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="restaurants",
    )

    class Meta:
        indexes = [
            models.Index(
                fields=["is_promoted", "promoted_until"],
                name="restaurant_promotion_idx",
            ),
        ]

    def __str__(self):
        return self.name


class Dish(CoreModel):
    """
    A menu entry. ``options`` is a list of
    ``{"name": str, "extra"?: int, "choices"?: [{"name": str, "extra"?: int}]}``.
    """

    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField(validators=[MinValueValidator(0)])
    photo = models.URLField(max_length=500, null=True, blank=True)
    description = models.CharField(max_length=140)
    options = models.JSONField(default=list, blank=True)
    restaurant = models.ForeignKey(
        Restaurant, on_delete=models.CASCADE, related_name="menu"
    )

    class Meta:
        verbose_name_plural = "dishes"

    def __str__(self):
        return f"{self.name} ({self.restaurant_id})"
