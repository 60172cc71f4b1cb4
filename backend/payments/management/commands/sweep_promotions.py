from django.core.management.base import BaseCommand
from django.utils import timezone

from payments.services import PaymentService
from restaurants.models import Restaurant


class Command(BaseCommand):
    help = (
        "End restaurant promotions whose paid period has passed.\n"
        "Runs the same sweep as the Celery beat task, once.\n"
        "Usage: python manage.py sweep_promotions [--dry-run]"
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="List expired promotions without clearing them",
        )

    def handle(self, *args, **options):
        if options["dry_run"]:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No changes will be made"))
            expired = Restaurant.objects.filter(
                is_promoted=True, promoted_until__lt=timezone.now()
            )
            for restaurant in expired:
                self.stdout.write(f" - {restaurant.name} (until {restaurant.promoted_until:%Y-%m-%d %H:%M})")
            self.stdout.write(f"{expired.count()} promotions would be ended")
            return

        cleared = PaymentService.check_promoted_restaurants()
        self.stdout.write(self.style.SUCCESS(f"Ended {cleared} expired promotions"))
