from django.urls import path
from .views import (
    MyRestaurantView,
    MyRestaurantsView,
    RestaurantDetailView,
    RestaurantListView,
    RestaurantSearchView,
)

app_name = "restaurants"

urlpatterns = [
    path("", RestaurantListView.as_view(), name="restaurant-list"),
    path("search/", RestaurantSearchView.as_view(), name="restaurant-search"),
    path("mine/", MyRestaurantsView.as_view(), name="my-restaurants"),
    path("mine/<int:pk>/", MyRestaurantView.as_view(), name="my-restaurant"),
    path("<int:pk>/", RestaurantDetailView.as_view(), name="restaurant-detail"),
]
