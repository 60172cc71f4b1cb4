import logging
import math

from django.db import transaction
from django.db.models import Count

from core_backend.base.results import failure, success
from core_backend.policies import Action, can
from .models import Category, Dish, Restaurant, slugify_category_name

logger = logging.getLogger(__name__)

PAGE_SIZE = 25

RESTAURANT_EDITABLE_FIELDS = ("name", "address", "cover_image")
DISH_EDITABLE_FIELDS = ("name", "price", "photo", "description", "options")


def paginate(queryset, page):
    """
    Slice ``queryset`` to one page of PAGE_SIZE rows.

    Returns (rows, total_pages, total_results); pages are 1-based and an
    out-of-range page yields an empty list.
    """
    page = max(int(page or 1), 1)
    total_results = queryset.count()
    offset = (page - 1) * PAGE_SIZE
    rows = list(queryset[offset:offset + PAGE_SIZE])
    return rows, math.ceil(total_results / PAGE_SIZE), total_results


def listed_restaurants():
    """Restaurants in listing order: promoted first, then oldest first."""
    return Restaurant.objects.select_related("category").order_by("-is_promoted", "id")


class CategoryService:

    @staticmethod
    def get_or_create_category(name: str) -> Category:
        slug = slugify_category_name(name)
        category, created = Category.objects.get_or_create(
            slug=slug, defaults={"name": name.strip()}
        )
        if created:
            logger.info(f"Created category '{slug}'")
        return category

    @staticmethod
    def all_categories() -> dict:
        try:
            categories = Category.objects.annotate(restaurant_count=Count("restaurants"))
            return success(categories=list(categories))
        except Exception:
            logger.exception("Loading categories failed")
            return failure("Could not load categories")

    @staticmethod
    def find_category_by_slug(slug: str, page: int = 1) -> dict:
        try:
            category = (
                Category.objects.annotate(restaurant_count=Count("restaurants"))
                .filter(slug=slug)
                .first()
            )
            if category is None:
                return failure("Category not found")

            restaurants, total_pages, total_results = paginate(
                listed_restaurants().filter(category=category), page
            )
            return success(
                category=category,
                restaurants=restaurants,
                total_pages=total_pages,
                total_results=total_results,
            )
        except Exception:
            logger.exception(f"Loading category '{slug}' failed")
            return failure("Could not load category")


class RestaurantService:

    @staticmethod
    def create_restaurant(owner, name: str, address: str, category_name: str, cover_image: str = None) -> dict:
        try:
            with transaction.atomic():
                category = CategoryService.get_or_create_category(category_name)
                restaurant = Restaurant.objects.create(
                    owner=owner,
                    name=name,
                    address=address,
                    cover_image=cover_image,
                    category=category,
                )
            logger.info(f"Owner {owner.pk} created restaurant {restaurant.id}")
            return success(restaurant_id=restaurant.id)
        except Exception:
            logger.exception(f"Restaurant creation failed for owner {owner.pk}")
            return failure("Could not create restaurant")

    @staticmethod
    def edit_restaurant(owner, restaurant_id, **changes) -> dict:
        try:
            with transaction.atomic():
                restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
                if restaurant is None:
                    return failure("Restaurant not found")

                if not can(owner, restaurant, Action.MANAGE_RESTAURANT):
                    return failure("You can't edit a restaurant that you don't own")

                category_name = changes.pop("category_name", None)
                if category_name:
                    restaurant.category = CategoryService.get_or_create_category(category_name)

                for field in RESTAURANT_EDITABLE_FIELDS:
                    if field in changes:
                        setattr(restaurant, field, changes[field])

                restaurant.save()
            return success()
        except Exception:
            logger.exception(f"Editing restaurant {restaurant_id} failed")
            return failure("Could not edit Restaurant")

    @staticmethod
    def delete_restaurant(owner, restaurant_id) -> dict:
        try:
            with transaction.atomic():
                restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
                if restaurant is None:
                    return failure("Restaurant not found")

                if not can(owner, restaurant, Action.MANAGE_RESTAURANT):
                    return failure("You can't delete a restaurant that you don't own")

                restaurant.delete()
            logger.info(f"Owner {owner.pk} deleted restaurant {restaurant_id}")
            return success()
        except Exception:
            logger.exception(f"Deleting restaurant {restaurant_id} failed")
            return failure("Could not delete restaurant.")

    @staticmethod
    def all_restaurants(page: int = 1) -> dict:
        try:
            results, total_pages, total_results = paginate(listed_restaurants(), page)
            return success(
                results=results, total_pages=total_pages, total_results=total_results
            )
        except Exception:
            logger.exception("Loading restaurants failed")
            return failure("Could not load restaurants")

    @staticmethod
    def find_restaurant_by_id(restaurant_id) -> dict:
        try:
            restaurant = (
                Restaurant.objects.select_related("category")
                .prefetch_related("menu")
                .filter(pk=restaurant_id)
                .first()
            )
            if restaurant is None:
                return failure("Restaurant not found")
            return success(restaurant=restaurant)
        except Exception:
            logger.exception(f"Loading restaurant {restaurant_id} failed")
            return failure("Could not find restaurant")

    @staticmethod
    def search_restaurant_by_name(query: str, page: int = 1) -> dict:
        try:
            restaurants, total_pages, total_results = paginate(
                listed_restaurants().filter(name__icontains=query), page
            )
            return success(
                restaurants=restaurants,
                total_pages=total_pages,
                total_results=total_results,
            )
        except Exception:
            logger.exception(f"Restaurant search for '{query}' failed")
            return failure("Could not search for restaurants")

    @staticmethod
    def my_restaurants(owner) -> dict:
        try:
            restaurants = listed_restaurants().filter(owner=owner)
            return success(restaurants=list(restaurants))
        except Exception:
            logger.exception(f"Loading restaurants of owner {owner.pk} failed")
            return failure("Could not find restaurants.")

    @staticmethod
    def my_restaurant(owner, restaurant_id) -> dict:
        try:
            restaurant = (
                Restaurant.objects.select_related("category")
                .prefetch_related("menu", "orders")
                .filter(pk=restaurant_id, owner=owner)
                .first()
            )
            if restaurant is None:
                return failure("Restaurant not found")
            return success(restaurant=restaurant)
        except Exception:
            logger.exception(f"Loading restaurant {restaurant_id} for owner {owner.pk} failed")
            return failure("Could not find restaurant")


class DishService:

    @staticmethod
    def create_dish(owner, restaurant_id, name: str, price: int, description: str, options=None, photo: str = None) -> dict:
        try:
            with transaction.atomic():
                restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
                if restaurant is None:
                    return failure("Restaurant not found")

                if not can(owner, restaurant, Action.MANAGE_DISH):
                    return failure("You can't do that.")

                dish = Dish.objects.create(
                    restaurant=restaurant,
                    name=name,
                    price=price,
                    description=description,
                    options=options or [],
                    photo=photo,
                )
            return success(dish_id=dish.id)
        except Exception:
            logger.exception(f"Dish creation failed for restaurant {restaurant_id}")
            return failure("Could not create dish")

    @staticmethod
    def edit_dish(owner, dish_id, **changes) -> dict:
        try:
            with transaction.atomic():
                dish = Dish.objects.select_related("restaurant").filter(pk=dish_id).first()
                if dish is None:
                    return failure("Dish not found")

                if not can(owner, dish, Action.MANAGE_DISH):
                    return failure("You can't do that.")

                for field in DISH_EDITABLE_FIELDS:
                    if field in changes:
                        setattr(dish, field, changes[field])
                dish.save()
            return success()
        except Exception:
            logger.exception(f"Editing dish {dish_id} failed")
            return failure("Could not edit dish")

    @staticmethod
    def delete_dish(owner, dish_id) -> dict:
        try:
            with transaction.atomic():
                dish = Dish.objects.select_related("restaurant").filter(pk=dish_id).first()
                if dish is None:
                    return failure("Dish not found")

                if not can(owner, dish, Action.MANAGE_DISH):
                    return failure("You can't do that.")

                dish.delete()
            return success()
        except Exception:
            logger.exception(f"Deleting dish {dish_id} failed")
            return failure("Could not delete dish")
