"""
Authority and user API tests: no privilege escalation via API.
"""

from django.test import TestCase
from rest_framework.test import APIClient
from apps.users.models import User


class AuthoritySmokeTests(TestCase):
    """Smoke tests for authority model: ADMIN cannot be created via API."""

    def setUp(self):
        self.client = APIClient()
        User.objects.create_superuser(
            username="admin_authority_test",
            password="testpass123",
        )
        # Get token for admin
        r = self.client.post(
            "/api/v1/auth/login",
            {"username": "admin_authority_test", "password": "testpass123"},
            format="json",
        )
        self.assertEqual(r.status_code, 200, r.data)
        self.token = r.data["data"]["token"]

    def test_superuser_is_admin(self):
        admin = User.objects.get(username="admin_authority_test")
        self.assertEqual(admin.role, "ADMIN")
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.has_perm("adoptions.view_adoptionrequest"))

    def test_cannot_create_admin_via_api(self):
        """POST /api/v1/users with role=ADMIN must be rejected."""
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {self.token}")
        r = self.client.post(
            "/api/v1/users",
            {
                "username": "would_be_admin",
                "password": "pass12345",
                "first_name": "Admin",
                "role": "ADMIN",
            },
            format="json",
        )
        self.assertEqual(r.status_code, 422, r.data)
        # Validation errors live in errors (structured error contract)
        self.assertEqual(
            r.data["errors"]["role"][0],
            "Cannot create ADMIN users via API",
            f"Expected ADMIN creation rejection in errors.role; got: {r.data}",
        )
        self.assertFalse(User.objects.filter(username="would_be_admin").exists())

    def test_non_admin_roles_have_no_admin_access(self):
        staff = User.objects.create_user(
            username="plain_staff", password="testpass123", role="STAFF"
        )
        self.assertFalse(staff.is_staff)
        self.assertFalse(staff.is_superuser)
        self.assertFalse(staff.has_perm("adoptions.change_adoptionrequest"))

    def test_inactive_admin_loses_admin_access(self):
        admin = User.objects.get(username="admin_authority_test")
        admin.is_active = False
        self.assertFalse(admin.is_staff)
        self.assertFalse(admin.has_module_perms("adoptions"))

    def test_create_user_normalises_email_domain(self):
        user = User.objects.create_user(
            username="mixed_case_mail", password="testpass123", email="Pat@Example.COM"
        )
        self.assertEqual(user.email, "Pat@example.com")
        self.assertEqual(user.role, "ADOPTER")
