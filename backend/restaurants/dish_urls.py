from django.urls import path
from .views import DishCreateView, DishDetailView

app_name = "dishes"

urlpatterns = [
    path("", DishCreateView.as_view(), name="dish-create"),
    path("<int:pk>/", DishDetailView.as_view(), name="dish-detail"),
]
