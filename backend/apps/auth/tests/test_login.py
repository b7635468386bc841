"""
Login and logout: token issue, failure envelope and activity entries.
"""

from rest_framework.test import APITestCase

from apps.activity.models import ActivityLog
from apps.users.models import User


class LoginTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username="login_staff",
            password="testpass123",
            role="STAFF",
            first_name="Sam",
        )

    def test_login_returns_token_and_user(self):
        r = self.client.post(
            "/api/v1/auth/login",
            {"username": "login_staff", "password": "testpass123"},
            format="json",
        )
        self.assertEqual(r.status_code, 200, r.data)
        self.assertTrue(r.data["success"])
        self.assertTrue(r.data["data"]["token"])
        self.assertTrue(r.data["data"]["refresh_token"])
        self.assertEqual(r.data["data"]["user"]["role"], "STAFF")
        self.assertTrue(
            ActivityLog.objects.filter(actor=self.user, action_type="LOGIN").exists()
        )

    def test_token_authenticates_follow_up_requests(self):
        r = self.client.post(
            "/api/v1/auth/login",
            {"username": "login_staff", "password": "testpass123"},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['data']['token']}")
        me = self.client.get("/api/v1/users/me")
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.data["data"]["username"], "login_staff")

    def test_wrong_password_is_401(self):
        r = self.client.post(
            "/api/v1/auth/login",
            {"username": "login_staff", "password": "wrong-password"},
            format="json",
        )
        self.assertEqual(r.status_code, 401)
        self.assertFalse(r.data["success"])
        self.assertEqual(r.data["code"], "UNAUTHORIZED")
        entry = ActivityLog.objects.get(action_type="FAILED_LOGIN")
        self.assertIsNone(entry.actor_id)
        self.assertIn("login_staff", entry.description)

    def test_missing_fields_is_422(self):
        r = self.client.post("/api/v1/auth/login", {}, format="json")
        self.assertEqual(r.status_code, 422)
        self.assertEqual(r.data["code"], "VALIDATION_ERROR")

    def test_logout_logs_activity(self):
        self.client.force_authenticate(self.user)
        r = self.client.post("/api/v1/auth/logout", {}, format="json")
        self.assertEqual(r.status_code, 200)
        self.assertTrue(
            ActivityLog.objects.filter(actor=self.user, action_type="LOGOUT").exists()
        )

    def test_logout_requires_authentication(self):
        r = self.client.post("/api/v1/auth/logout", {}, format="json")
        self.assertEqual(r.status_code, 401)
