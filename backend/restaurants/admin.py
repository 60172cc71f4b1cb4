from django.contrib import admin
from .models import Category, Dish, Restaurant


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "created_at")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}


class DishInline(admin.TabularInline):
    model = Dish
    extra = 0
    fields = ("name", "price", "description")


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    list_display = ("name", "owner", "category", "is_promoted", "promoted_until")
    list_filter = ("is_promoted", "category")
    search_fields = ("name", "address", "owner__email")
    list_select_related = ("owner", "category")
    inlines = [DishInline]


@admin.register(Dish)
class DishAdmin(admin.ModelAdmin):
    list_display = ("name", "restaurant", "price")
    search_fields = ("name", "restaurant__name")
    list_select_related = ("restaurant",)
