from django.contrib import admin
from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("transaction_id", "restaurant", "user", "created_at")
    search_fields = ("transaction_id", "restaurant__name", "user__email")
    list_select_related = ("restaurant", "user")
    readonly_fields = ("created_at", "updated_at")
