from rest_framework import permissions

from core_backend.base import BaseAPIView
from users.models import User
from users.permissions import HasRole
from .serializers import (
    CategorySerializer,
    CreateDishSerializer,
    CreateRestaurantSerializer,
    EditDishSerializer,
    EditRestaurantSerializer,
    PageSerializer,
    RestaurantDetailSerializer,
    RestaurantSerializer,
    SearchRestaurantSerializer,
)
from .services import CategoryService, DishService, RestaurantService


class PublicReadMixin:
    """Reads are open to everyone; writes go through the role gate."""

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [HasRole()]


class RestaurantListView(PublicReadMixin, BaseAPIView):
    allowed_roles = {"POST": [User.Role.OWNER]}

    def get(self, request):
        params = PageSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return self.respond(
            RestaurantService.all_restaurants(params.validated_data["page"]),
            payload_serializers={"results": (RestaurantSerializer, True)},
        )

    def post(self, request):
        serializer = CreateRestaurantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            RestaurantService.create_restaurant(request.user, **serializer.validated_data)
        )


class RestaurantSearchView(BaseAPIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        params = SearchRestaurantSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return self.respond(
            RestaurantService.search_restaurant_by_name(
                params.validated_data["query"], params.validated_data["page"]
            ),
            payload_serializers={"restaurants": (RestaurantSerializer, True)},
        )


class RestaurantDetailView(PublicReadMixin, BaseAPIView):
    allowed_roles = {"PATCH": [User.Role.OWNER], "DELETE": [User.Role.OWNER]}

    def get(self, request, pk):
        return self.respond(
            RestaurantService.find_restaurant_by_id(pk),
            payload_serializers={"restaurant": (RestaurantDetailSerializer, False)},
        )

    def patch(self, request, pk):
        serializer = EditRestaurantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(
            RestaurantService.edit_restaurant(request.user, pk, **serializer.validated_data)
        )

    def delete(self, request, pk):
        return self.respond(RestaurantService.delete_restaurant(request.user, pk))


class MyRestaurantsView(BaseAPIView):
    permission_classes = [HasRole]
    allowed_roles = [User.Role.OWNER]

    def get(self, request):
        return self.respond(
            RestaurantService.my_restaurants(request.user),
            payload_serializers={"restaurants": (RestaurantSerializer, True)},
        )


class MyRestaurantView(BaseAPIView):
    permission_classes = [HasRole]
    allowed_roles = [User.Role.OWNER]

    def get(self, request, pk):
        return self.respond(
            RestaurantService.my_restaurant(request.user, pk),
            payload_serializers={"restaurant": (RestaurantDetailSerializer, False)},
        )


class CategoryListView(BaseAPIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return self.respond(
            CategoryService.all_categories(),
            payload_serializers={"categories": (CategorySerializer, True)},
        )


class CategoryDetailView(BaseAPIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request, slug):
        params = PageSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return self.respond(
            CategoryService.find_category_by_slug(slug, params.validated_data["page"]),
            payload_serializers={
                "category": (CategorySerializer, False),
                "restaurants": (RestaurantSerializer, True),
            },
        )


class DishCreateView(BaseAPIView):
    permission_classes = [HasRole]
    allowed_roles = [User.Role.OWNER]

    def post(self, request):
        serializer = CreateDishSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(DishService.create_dish(request.user, **serializer.validated_data))


class DishDetailView(BaseAPIView):
    permission_classes = [HasRole]
    allowed_roles = [User.Role.OWNER]

    def patch(self, request, pk):
        serializer = EditDishSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self.respond(DishService.edit_dish(request.user, pk, **serializer.validated_data))

    def delete(self, request, pk):
        return self.respond(DishService.delete_dish(request.user, pk))
