# ============================================
# accounts/services.py
# ============================================
import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

logger = logging.getLogger(__name__)

User = get_user_model()


class AccountService:

    @staticmethod
    @transaction.atomic
    def register_user(*, email: str, password: str, name: str) -> User:
        """Create a new account with a usable password"""
        email = User.objects.normalize_email(email)

        if User.objects.filter(email__iexact=email).exists():
            raise ValidationError("User already exists")

        try:
            user = User.objects.create_user(email=email, password=password, name=name)
        except IntegrityError:
            raise ValidationError("User already exists")

        logger.info("[accounts] registered user_id=%s", user.id)
        return user

    @staticmethod
    def update_profile(*, user: User, name: str, profile_image: Optional[str] = None) -> User:
        """Update display name and, when given, the profile image URL"""
        user.name = name
        update_fields = ["name"]

        if profile_image is not None:
            user.profile_image = profile_image
            update_fields.append("profile_image")

        user.save(update_fields=update_fields)
        return user

    @staticmethod
    def change_password(*, user: User, current_password: str, new_password: str) -> User:
        """Replace the password after verifying the current one"""

        # Accounts created without a password have nothing to verify against
        if not user.has_usable_password():
            raise ValidationError("This account does not have a password")

        if not user.check_password(current_password):
            raise ValidationError("Current password is incorrect")

        user.set_password(new_password)
        user.save(update_fields=["password"])

        logger.info("[accounts] password changed user_id=%s", user.id)
        return user
