"""
Account creation for shelter users.

UserManager delegates here so the model stays free of persistence logic.
Only the ADMIN role reaches the Django admin site.
"""

from __future__ import annotations

from typing import Any, Optional, Type

ADMIN_SITE_ROLES = frozenset({"ADMIN"})


def create_user(
    *,
    user_model: Type[Any],
    username: str,
    password: Optional[str] = None,
    role: str = "ADOPTER",
    using: Optional[str] = None,
    **extra_fields: Any,
):
    """Create and persist a user with a normalised email."""
    if not username:
        raise ValueError("The username field must be set")

    email = extra_fields.pop("email", "") or ""
    if email:
        email = user_model.objects.normalize_email(email)

    user = user_model(username=username, email=email, role=role, **extra_fields)
    user.set_password(password)
    user.save(using=using)
    return user


def create_superuser(
    *,
    user_model: Type[Any],
    username: str,
    password: Optional[str] = None,
    using: Optional[str] = None,
    **extra_fields: Any,
):
    extra_fields["role"] = "ADMIN"
    return create_user(
        user_model=user_model,
        username=username,
        password=password,
        using=using,
        **extra_fields,
    )


def has_admin_site_access(user: Any) -> bool:
    """Backs is_staff, is_superuser and the permission checks on User."""
    return user.is_active and user.role in ADMIN_SITE_ROLES
