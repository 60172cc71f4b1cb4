from celery import shared_task
import logging

from .services import PaymentService

logger = logging.getLogger(__name__)


@shared_task
def check_promoted_restaurants():
    """
    Clear the promotion of restaurants whose paid period has ended.

    Runs every PROMOTION_SWEEP_INTERVAL seconds via Celery Beat.

    Returns:
        dict: Status and number of promotions ended
    """
    try:
        cleared = PaymentService.check_promoted_restaurants()
        return {"status": "completed", "cleared": cleared}
    except Exception as exc:
        logger.error(f"Error in promotion sweep: {exc}", exc_info=True)
        raise
