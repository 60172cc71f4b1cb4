from django.urls import path
from .views import (
    CreateAccountView,
    CurrentUserView,
    LoginView,
    UserProfileView,
    VerifyEmailView,
)

app_name = "users"

urlpatterns = [
    path("", CreateAccountView.as_view(), name="create-account"),
    path("login/", LoginView.as_view(), name="login"),
    path("me/", CurrentUserView.as_view(), name="me"),
    path("verify-email/", VerifyEmailView.as_view(), name="verify-email"),
    path("<int:pk>/", UserProfileView.as_view(), name="user-detail"),
]
