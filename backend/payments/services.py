import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from core_backend.base.results import failure, success
from core_backend.policies import Action, can
from restaurants.models import Restaurant
from .models import Payment

logger = logging.getLogger(__name__)


class PaymentService:
    """Promotion payments and the sweep that ends expired promotions."""

    @staticmethod
    def create_payment(owner, transaction_id: str, restaurant_id) -> dict:
        """
        Record a payment and promote the restaurant for
        PROMOTION_DURATION_DAYS from now.
        """
        try:
            with transaction.atomic():
                restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
                if restaurant is None:
                    return failure("Restaurant not found.")

                if not can(owner, restaurant, Action.PROMOTE_RESTAURANT):
                    return failure("You are not allowed to do this.")

                restaurant.is_promoted = True
                restaurant.promoted_until = timezone.now() + timedelta(
                    days=settings.PROMOTION_DURATION_DAYS
                )
                restaurant.save(update_fields=["is_promoted", "promoted_until", "updated_at"])

                payment = Payment.objects.create(
                    transaction_id=transaction_id, restaurant=restaurant, user=owner
                )

            logger.info(
                f"Payment {payment.transaction_id} promoted restaurant {restaurant.id} "
                f"until {restaurant.promoted_until.isoformat()}"
            )
            return success()
        except Exception:
            logger.exception(f"Payment creation failed for restaurant {restaurant_id}")
            return failure("Could not create payment.")

    @staticmethod
    def get_payments(user) -> dict:
        try:
            return success(payments=list(Payment.objects.filter(user=user)))
        except Exception:
            logger.exception(f"Loading payments failed for user {user.pk}")
            return failure("Could not load payments.")

    @staticmethod
    def check_promoted_restaurants() -> int:
        """
        End every promotion whose ``promoted_until`` has passed.

        Rows are saved one by one; a row that fails is logged and left for
        the next sweep. Returns the number of promotions ended.
        """
        expired = Restaurant.objects.filter(
            is_promoted=True, promoted_until__lt=timezone.now()
        )

        cleared = 0
        for restaurant in expired:
            restaurant.is_promoted = False
            restaurant.promoted_until = None
            try:
                with transaction.atomic():
                    restaurant.save(update_fields=["is_promoted", "promoted_until", "updated_at"])
            except Exception as e:
                logger.warning(f"Could not end promotion of restaurant {restaurant.id}: {e}")
                continue
            cleared += 1

        if cleared:
            logger.info(f"Ended {cleared} expired restaurant promotions")
        return cleared
