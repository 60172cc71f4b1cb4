from django.conf import settings
from django.db import models

from core_backend.models import CoreModel


class Payment(CoreModel):
    """A promotion purchase made by a restaurant owner."""

    transaction_id = models.CharField(max_length=255)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="payments",
    )
    restaurant = models.ForeignKey(
        "restaurants.Restaurant",
        on_delete=models.CASCADE,
        related_name="payments",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"Payment {self.transaction_id} for restaurant {self.restaurant_id}"
