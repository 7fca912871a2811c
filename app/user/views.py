"""
User Views

회원가입/로그인/로그아웃/내 정보 API
"""

import logging

from common.jwt_cookies import delete_jwt_cookies, set_jwt_cookies
from common.responses import success_response
from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from user.serializers import (
    UserLoginSerializer,
    UserRegistrationSerializer,
    UserSummarySerializer,
)

logger = logging.getLogger(__name__)


class UserRegistrationView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        request=UserRegistrationSerializer,
        responses={201: OpenApiTypes.OBJECT},
        summary="Register",
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Registered user {user.pk}")
        return success_response(
            status.HTTP_201_CREATED,
            message="User registered successfully",
            user=UserSummarySerializer(user).data,
        )


class UserLoginView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        request=UserLoginSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="User Login",
        description="Login with username and password to get JWT tokens.",
    )
    def post(self, request):
        serializer = UserLoginSerializer(
            data=request.data, context={"request": request}
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        refresh = RefreshToken.for_user(user)
        access = str(refresh.access_token)

        response = success_response(
            access=access,
            refresh=str(refresh),
            user=UserSummarySerializer(user).data,
        )
        return set_jwt_cookies(response, access, str(refresh))


class UserLogoutView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(request=None, responses={200: OpenApiTypes.OBJECT})
    def post(self, request):
        response = success_response(message="Logged out")
        return delete_jwt_cookies(response)


class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserSummarySerializer})
    def get(self, request):
        return success_response(user=UserSummarySerializer(request.user).data)
