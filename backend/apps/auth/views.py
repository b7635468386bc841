"""
Authentication views: login, logout.

No domain logic - authentication only.
"""

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from shelter.exceptions import error_response
from shelter.throttling import LoginThrottle
from apps.auth.serializers import LoginSerializer
from apps.activity.services import log_activity
from apps.users.serializers import UserSerializer


@api_view(["POST"])
@permission_classes([AllowAny])
@throttle_classes([LoginThrottle])
def login(request):
    """
    POST /api/v1/auth/login

    Authenticate user and return JWT token.
    """
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    username = serializer.validated_data["username"]
    password = serializer.validated_data["password"]

    user = authenticate(request=request, username=username, password=password)

    if user is None:
        log_activity(
            actor_id=None,
            action_type="FAILED_LOGIN",
            description=f"Failed login attempt for: {username}",
            request=request,
        )
        return error_response(
            "UNAUTHORIZED",
            "Invalid credentials",
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    refresh = RefreshToken.for_user(user)
    log_activity(
        actor_id=user.id,
        action_type="LOGIN",
        description="User logged in",
        request=request,
    )

    return Response(
        {
            "success": True,
            "message": "Login successful",
            "data": {
                "token": str(refresh.access_token),
                "refresh_token": str(refresh),
                "user": UserSerializer(user).data,
            },
        },
        status=status.HTTP_200_OK,
    )


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def logout(request):
    """
    POST /api/v1/auth/logout

    Tokens are stateless; the client discards them. The logout is recorded.
    """
    log_activity(
        actor_id=request.user.id,
        action_type="LOGOUT",
        description="User logged out",
        request=request,
    )
    return Response(
        {"success": True, "message": "Logged out", "data": None},
        status=status.HTTP_200_OK,
    )
