# ============================================
# accounts/serializers.py
# ============================================
from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, max_length=100, write_only=True)
    name = serializers.CharField(max_length=50)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, max_length=50)
    profileImage = serializers.URLField(
        source="profile_image",
        max_length=500,
        required=False,
        allow_blank=True,
    )


class PasswordChangeSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(source="current_password")
    newPassword = serializers.CharField(source="new_password", min_length=6, max_length=100)


class UserOutputSerializer(serializers.ModelSerializer):
    profileImage = serializers.CharField(source="profile_image", read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "name", "profileImage"]
