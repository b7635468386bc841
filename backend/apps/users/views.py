"""
User views: get current user, list users, create users.

Listing requires STAFF or ADMIN; creation requires ADMIN.
"""

from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.pagination import LimitOffsetPagination
from shelter.exceptions import error_response
from shelter.permissions import IsAnyRole, IsAdmin, IsStaffOrAdmin
from apps.users.models import User
from apps.users.serializers import UserSerializer, UserCreateSerializer


@api_view(["GET"])
@permission_classes([IsAnyRole])
def get_current_user(request):
    """
    GET /api/v1/users/me

    Get current authenticated user.
    """
    serializer = UserSerializer(request.user)
    return Response(
        {"success": True, "message": "Current user", "data": serializer.data},
        status=status.HTTP_200_OK,
    )


@api_view(["GET", "POST"])
def list_or_create_users(request):
    """
    GET /api/v1/users/ - List users with pagination (STAFF or ADMIN).
    POST /api/v1/users/ - Create a new user (ADMIN only).
    """
    if request.method == "GET":
        if not IsStaffOrAdmin().has_permission(request, None):
            return error_response(
                "FORBIDDEN", "You do not have permission to perform this action"
            )

        role = request.query_params.get("role")
        users = User.objects.all().order_by("username")
        if role:
            users = users.filter(role=role)

        paginator = LimitOffsetPagination()
        paginator.default_limit = 50
        paginator.max_limit = 100

        page = paginator.paginate_queryset(users, request)
        serializer = UserSerializer(page, many=True)

        return paginator.get_paginated_response(serializer.data)

    else:  # POST
        if not IsAdmin().has_permission(request, None):
            return error_response("FORBIDDEN", "Only ADMIN can create users")

        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=data["username"],
                    password=data["password"],
                    role=data["role"],
                    first_name=data["first_name"],
                    last_name=data["last_name"],
                    email=data["email"],
                    contact_number=data["contact_number"],
                )
        except IntegrityError:
            return error_response(
                "CONFLICT",
                f"User with username '{data['username']}' already exists",
                status_code=status.HTTP_409_CONFLICT,
            )

        return Response(
            {
                "success": True,
                "message": "User created",
                "data": UserSerializer(user).data,
            },
            status=status.HTTP_201_CREATED,
        )
