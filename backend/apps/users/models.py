"""
User model for the Animal Shelter backend.

Fields: id, username, first_name, last_name, email, contact_number, role,
password, created_at, updated_at. Username unique. Role choices ADMIN,
STAFF, VETERINARIAN, ADOPTER.
"""

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.core.validators import RegexValidator

from . import services


class Role(models.TextChoices):
    ADMIN = "ADMIN"
    STAFF = "STAFF"
    VETERINARIAN = "VETERINARIAN"
    ADOPTER = "ADOPTER"


class UserManager(BaseUserManager):
    """Custom user manager."""

    def create_user(self, username, password=None, role=Role.ADOPTER, **extra_fields):
        return services.create_user(
            user_model=self.model,
            username=username,
            password=password,
            role=role,
            using=self._db,
            **extra_fields,
        )

    def create_superuser(self, username, password=None, **extra_fields):
        return services.create_superuser(
            user_model=self.model,
            username=username,
            password=password,
            using=self._db,
            **extra_fields,
        )


class User(AbstractBaseUser):
    """Custom User model with a role field."""

    username = models.CharField(
        max_length=150,
        unique=True,
        validators=[
            RegexValidator(
                regex=r"^[\w.@+-]+$",
                message=(
                    "Username may contain only letters, numbers, and @/./+/-/_ "
                    "characters."
                ),
            )
        ],
    )
    first_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)
    email = models.EmailField(max_length=255, blank=True)
    contact_number = models.CharField(max_length=30, blank=True)
    role = models.CharField(max_length=20, choices=Role.choices)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "username"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["role"]

    objects = UserManager()

    class Meta:
        db_table = "users"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(
                    role__in=["ADMIN", "STAFF", "VETERINARIAN", "ADOPTER"]
                ),
                name="valid_role",
            )
        ]

    def __str__(self):
        return self.username

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip() or self.username

    # Django admin hooks
    @property
    def is_staff(self):
        return services.has_admin_site_access(self)

    @property
    def is_superuser(self):
        return services.has_admin_site_access(self)

    def has_perm(self, perm, obj=None):
        return services.has_admin_site_access(self)

    def has_module_perms(self, app_label):
        return services.has_admin_site_access(self)
