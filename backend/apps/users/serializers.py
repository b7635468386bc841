"""
Serializers for User model.

No business logic in serializers - validation only.
"""

from rest_framework import serializers
from apps.users.models import User, Role


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model."""

    role = serializers.ChoiceField(choices=Role.choices, read_only=True)
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "first_name",
            "last_name",
            "full_name",
            "email",
            "contact_number",
            "role",
        ]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """Serializer for user creation endpoint."""

    username = serializers.CharField(max_length=150, required=True)
    password = serializers.CharField(write_only=True, required=True, min_length=8)
    first_name = serializers.CharField(max_length=100, required=False, default="")
    last_name = serializers.CharField(max_length=100, required=False, default="")
    email = serializers.EmailField(required=False, default="")
    contact_number = serializers.CharField(max_length=30, required=False, default="")
    role = serializers.ChoiceField(choices=Role.choices, required=True)

    def validate_role(self, value):
        """ADMIN accounts are provisioned out of band, never through the API."""
        if value == Role.ADMIN:
            raise serializers.ValidationError("Cannot create ADMIN users via API")
        return value
