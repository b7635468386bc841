"""
Permission classes for role-based access control.

Role is read from request.user (authenticated via JWT).
Role is NEVER read from request body, query parameters, or headers.
"""

from rest_framework import permissions

ADMIN = "ADMIN"
STAFF = "STAFF"
VETERINARIAN = "VETERINARIAN"
ADOPTER = "ADOPTER"


def has_role(user, *roles):
    if not user or not user.is_authenticated:
        return False

    if not hasattr(user, "role"):
        return False

    return user.role in roles


class IsAdmin(permissions.BasePermission):
    """Allow ADMIN role only."""

    def has_permission(self, request, view):
        return has_role(request.user, ADMIN)


class IsStaffOrAdmin(permissions.BasePermission):
    """Allow STAFF or ADMIN roles."""

    def has_permission(self, request, view):
        return has_role(request.user, STAFF, ADMIN)


class IsAdopter(permissions.BasePermission):
    """Allow ADOPTER role only."""

    def has_permission(self, request, view):
        return has_role(request.user, ADOPTER)


class IsAnyRole(permissions.BasePermission):
    """Allow any authenticated user holding a known role."""

    def has_permission(self, request, view):
        return has_role(request.user, ADMIN, STAFF, VETERINARIAN, ADOPTER)
