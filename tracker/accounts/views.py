# ============================================
# accounts/views.py
# ============================================
import logging

from django.contrib.auth import authenticate, login, logout, update_session_auth_hash
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import permissions, serializers, status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers import (
    LoginSerializer,
    PasswordChangeSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    UserOutputSerializer,
)
from accounts.services import AccountService

logger = logging.getLogger(__name__)

MessageSerializer = inline_serializer(
    name="Message",
    fields={"message": serializers.CharField()},
)


class RegisterAPIView(APIView):
    """
    POST: Create an account

    Request body:
    - email: string (required)
    - password: string (required, 6-100 chars)
    - name: string (required)
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(tags=["Auth"], request=RegisterSerializer, responses={201: UserOutputSerializer})
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AccountService.register_user(**serializer.validated_data)

        return Response(UserOutputSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginAPIView(APIView):
    """
    POST: Start a session with email + password
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(tags=["Auth"], request=LoginSerializer, responses={200: UserOutputSerializer})
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            username=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            logger.info("[accounts] login failed: invalid credentials")
            raise AuthenticationFailed("Invalid email or password")

        login(request, user)
        return Response(UserOutputSerializer(user).data)


class LogoutAPIView(APIView):
    """
    POST: End the current session
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(tags=["Auth"], request=None, responses={200: MessageSerializer})
    def post(self, request):
        logout(request)
        return Response({"message": "Logged out"})


class ProfileAPIView(APIView):
    """
    GET: Current user's profile
    PUT: Update name / profile image

    Request body (PUT):
    - name: string (required, 1-50 chars)
    - profileImage: URL (optional)
    """

    @extend_schema(tags=["Profile"], responses={200: UserOutputSerializer})
    def get(self, request):
        return Response(UserOutputSerializer(request.user).data)

    @extend_schema(tags=["Profile"], request=ProfileUpdateSerializer, responses={200: UserOutputSerializer})
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AccountService.update_profile(user=request.user, **serializer.validated_data)

        return Response(UserOutputSerializer(user).data)


class CheckPasswordAPIView(APIView):
    """
    GET: Whether the current account has a password set
    """

    @extend_schema(
        tags=["Profile"],
        responses={200: inline_serializer(name="HasPassword", fields={"hasPassword": serializers.BooleanField()})},
    )
    def get(self, request):
        return Response({"hasPassword": request.user.has_usable_password()})


class PasswordChangeAPIView(APIView):
    """
    POST: Change password

    Request body:
    - currentPassword: string (required)
    - newPassword: string (required, 6-100 chars)
    """

    @extend_schema(tags=["Profile"], request=PasswordChangeSerializer, responses={200: MessageSerializer})
    def post(self, request):
        serializer = PasswordChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AccountService.change_password(user=request.user, **serializer.validated_data)
        update_session_auth_hash(request, user)

        return Response({"message": "Password updated successfully"})
