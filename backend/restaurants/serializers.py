from rest_framework import serializers

from core_backend.base import TimestampedSerializer
from .models import Category, Dish, Restaurant


class CategorySummarySerializer(serializers.ModelSerializer):
    """Category as nested inside a restaurant."""

    class Meta:
        model = Category
        fields = ["id", "name", "slug", "cover_image"]


class CategorySerializer(TimestampedSerializer):
    # Annotated by CategoryService queries.
    restaurant_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Category
        fields = ["id", "name", "slug", "cover_image", "restaurant_count", "created_at", "updated_at"]


class DishChoiceSerializer(serializers.Serializer):
    name = serializers.CharField()
    extra = serializers.IntegerField(required=False, min_value=0)


class DishOptionSerializer(serializers.Serializer):
    name = serializers.CharField()
    choices = DishChoiceSerializer(many=True, required=False)
    extra = serializers.IntegerField(required=False, min_value=0)


class DishSerializer(TimestampedSerializer):
    class Meta:
        model = Dish
        fields = [
            "id",
            "name",
            "price",
            "photo",
            "description",
            "options",
            "restaurant",
            "created_at",
            "updated_at",
        ]


class RestaurantSerializer(TimestampedSerializer):
    category = CategorySummarySerializer(read_only=True)
    owner = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Restaurant
        fields = [
            "id",
            "name",
            "address",
            "cover_image",
            "is_promoted",
            "promoted_until",
            "category",
            "owner",
            "created_at",
            "updated_at",
        ]


class RestaurantDetailSerializer(RestaurantSerializer):
    menu = DishSerializer(many=True, read_only=True)

    class Meta(RestaurantSerializer.Meta):
        fields = RestaurantSerializer.Meta.fields + ["menu"]


class CreateRestaurantSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=5, max_length=255)
    address = serializers.CharField(max_length=255)
    category_name = serializers.CharField(max_length=100)
    cover_image = serializers.URLField(required=False, allow_null=True)


class EditRestaurantSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=5, max_length=255, required=False)
    address = serializers.CharField(max_length=255, required=False)
    category_name = serializers.CharField(max_length=100, required=False)
    cover_image = serializers.URLField(required=False, allow_null=True)


class PageSerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, required=False, default=1)


class SearchRestaurantSerializer(PageSerializer):
    query = serializers.CharField()


class CreateDishSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField()
    name = serializers.CharField(max_length=255)
    price = serializers.IntegerField(min_value=0)
    description = serializers.CharField(min_length=5, max_length=140)
    photo = serializers.URLField(required=False, allow_null=True)
    options = DishOptionSerializer(many=True, required=False, default=list)


class EditDishSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    price = serializers.IntegerField(min_value=0, required=False)
    description = serializers.CharField(min_length=5, max_length=140, required=False)
    photo = serializers.URLField(required=False, allow_null=True)
    options = DishOptionSerializer(many=True, required=False)
