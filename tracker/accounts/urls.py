# ============================================
# accounts/urls.py
# ============================================
from django.urls import path

from accounts.views import (
    CheckPasswordAPIView,
    LoginAPIView,
    LogoutAPIView,
    PasswordChangeAPIView,
    ProfileAPIView,
    RegisterAPIView,
)

app_name = "accounts"

urlpatterns = [
    path("register", RegisterAPIView.as_view(), name="register"),
    path("auth/login", LoginAPIView.as_view(), name="login"),
    path("auth/logout", LogoutAPIView.as_view(), name="logout"),

    # Profile
    path("profile", ProfileAPIView.as_view(), name="profile"),
    path("profile/check-password", CheckPasswordAPIView.as_view(), name="check-password"),
    path("profile/password", PasswordChangeAPIView.as_view(), name="password"),
]
