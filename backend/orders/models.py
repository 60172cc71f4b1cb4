from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.models import CoreModel


class Order(CoreModel):
    class OrderStatus(models.TextChoices):
        PENDING = "PENDING", _("Pending")
        COOKING = "COOKING", _("Cooking")
        COOKED = "COOKED", _("Cooked")
        PICKED_UP = "PICKED_UP", _("Picked up")
        DELIVERED = "DELIVERED", _("Delivered")

    # Lifecycle order; a status may only move to one further down the list.
    STATUS_SEQUENCE = [
        OrderStatus.PENDING,
        OrderStatus.COOKING,
        OrderStatus.COOKED,
        OrderStatus.PICKED_UP,
        OrderStatus.DELIVERED,
    ]

    total = models.PositiveIntegerField(null=True, blank=True)
    status = models.CharField(
        max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING
    )
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name="orders",
    )
    driver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="rides",
    )
    restaurant = models.ForeignKey(
        "restaurants.Restaurant",
        on_delete=models.SET_NULL,
        null=True,
        related_name="orders",
    )

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="order_status_idx"),
        ]

    def __str__(self):
        return f"Order {self.pk} ({self.status})"

    def can_transition_to(self, status) -> bool:
        sequence = [str(s) for s in self.STATUS_SEQUENCE]
        return sequence.index(str(status)) > sequence.index(str(self.status))


class OrderItem(CoreModel):
    """
    A dish on an order. ``options`` records the customer's selections as a
    list of ``{"name": str, "choice"?: str}``.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    dish = models.ForeignKey(
        "restaurants.Dish", on_delete=models.CASCADE, related_name="order_items"
    )
    options = models.JSONField(default=list, blank=True)

    def __str__(self):
        return f"{self.dish_id} on order {self.order_id}"
