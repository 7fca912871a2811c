from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from user.views import (
    CurrentUserView,
    UserLoginView,
    UserLogoutView,
    UserRegistrationView,
)

urlpatterns = [
    path("register/", UserRegistrationView.as_view(), name="register"),
    path("login/", UserLoginView.as_view(), name="login"),
    path("logout/", UserLogoutView.as_view(), name="logout"),
    path("me/", CurrentUserView.as_view(), name="current_user"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
]
