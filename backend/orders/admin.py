from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ("dish", "options")
    raw_id_fields = ("dish",)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "restaurant", "customer", "driver", "status", "total", "created_at")
    list_filter = ("status",)
    search_fields = ("id", "restaurant__name", "customer__email", "driver__email")
    list_select_related = ("restaurant", "customer", "driver")
    raw_id_fields = ("customer", "driver", "restaurant")
    inlines = [OrderItemInline]
