"""
Adoption API tests: envelopes, status codes and role checks.
"""

from django.test import TestCase
from rest_framework.test import APIClient

from apps.adoptions.models import AdoptionRequest
from apps.animals.models import Animal
from apps.users.models import User


class AdoptionViewsTestBase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.staff = User.objects.create_user(
            username="view_staff", password="testpass123", role="STAFF"
        )
        self.vet = User.objects.create_user(
            username="view_vet", password="testpass123", role="VETERINARIAN"
        )
        self.adopter = User.objects.create_user(
            username="view_adopter", password="testpass123", role="ADOPTER"
        )
        self.other_adopter = User.objects.create_user(
            username="view_other", password="testpass123", role="ADOPTER"
        )
        self.animal = Animal.objects.create(name="Pepper", type="Cat")


class SubmitViewTests(AdoptionViewsTestBase):
    def test_adopter_submits_request(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.post(
            "/api/v1/adoptions", {"animal_id": self.animal.id}, format="json"
        )
        self.assertEqual(r.status_code, 201, r.data)
        self.assertTrue(r.data["success"])
        self.assertEqual(r.data["data"]["status"], "Pending")
        self.assertEqual(r.data["data"]["animal_id"], self.animal.id)
        self.assertEqual(r.data["data"]["adopter_id"], self.adopter.id)

    def test_staff_cannot_submit(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.post(
            "/api/v1/adoptions", {"animal_id": self.animal.id}, format="json"
        )
        self.assertEqual(r.status_code, 403)
        self.assertEqual(r.data["code"], "FORBIDDEN")

    def test_missing_animal_id_is_422(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.post("/api/v1/adoptions", {}, format="json")
        self.assertEqual(r.status_code, 422)
        self.assertFalse(r.data["success"])
        self.assertEqual(r.data["code"], "VALIDATION_ERROR")
        self.assertIn("animal_id", r.data["errors"])

    def test_unknown_animal_is_404(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.post("/api/v1/adoptions", {"animal_id": 987654}, format="json")
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data["code"], "NOT_FOUND")

    def test_unauthenticated_is_rejected(self):
        r = self.client.post(
            "/api/v1/adoptions", {"animal_id": self.animal.id}, format="json"
        )
        self.assertEqual(r.status_code, 401)
        self.assertFalse(r.data["success"])


class ProcessViewTests(AdoptionViewsTestBase):
    def setUp(self):
        super().setUp()
        self.adoption = AdoptionRequest.objects.create(
            animal=self.animal, adopter=self.adopter
        )
        self.url = f"/api/v1/adoptions/{self.adoption.id}/process"

    def test_staff_schedules_interview(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.put(
            self.url,
            {
                "status": "Interview Scheduled",
                "interview_date": "2025-01-10T10:00",
                "staff_comments": "Phone screen done",
            },
            format="json",
        )
        self.assertEqual(r.status_code, 200, r.data)
        self.assertEqual(r.data["data"]["status"], "Interview Scheduled")
        self.assertIsNotNone(r.data["data"]["interview_date"])
        self.assertEqual(r.data["data"]["staff_comments"], "Phone screen done")
        self.assertEqual(r.data["data"]["processed_by_id"], self.staff.id)
        self.assertEqual(
            r.data["data"]["allowed_transitions"], ["Approved", "Rejected"]
        )

    def test_comments_field_is_stored(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.put(
            self.url, {"status": "Rejected", "comments": "No garden"}, format="json"
        )
        self.assertEqual(r.status_code, 200, r.data)
        self.adoption.refresh_from_db()
        self.assertEqual(self.adoption.staff_comments, "No garden")
        self.assertEqual(r.data["data"]["staff_comments"], "No garden")

    def test_comments_wins_over_staff_comments_alias(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.put(
            self.url,
            {"status": "Rejected", "comments": "Kept", "staff_comments": "Ignored"},
            format="json",
        )
        self.assertEqual(r.status_code, 200, r.data)
        self.adoption.refresh_from_db()
        self.assertEqual(self.adoption.staff_comments, "Kept")

    def test_interview_without_date_is_422(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.put(self.url, {"status": "Interview Scheduled"}, format="json")
        self.assertEqual(r.status_code, 422)
        self.assertEqual(r.data["code"], "VALIDATION_ERROR")
        self.assertIn("interview_date", r.data["errors"])

    def test_invalid_transition_is_422(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.put(self.url, {"status": "Completed"}, format="json")
        self.assertEqual(r.status_code, 422)
        self.assertEqual(r.data["code"], "INVALID_TRANSITION")
        self.adoption.refresh_from_db()
        self.assertEqual(self.adoption.status, "Pending")

    def test_missing_request_is_404(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.put(
            "/api/v1/adoptions/999999/process", {"status": "Approved"}, format="json"
        )
        self.assertEqual(r.status_code, 404)

    def test_adopter_cannot_process(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.put(self.url, {"status": "Approved"}, format="json")
        self.assertEqual(r.status_code, 403)
        self.adoption.refresh_from_db()
        self.assertEqual(self.adoption.status, "Pending")

    def test_veterinarian_cannot_process(self):
        self.client.force_authenticate(user=self.vet)
        r = self.client.put(self.url, {"status": "Approved"}, format="json")
        self.assertEqual(r.status_code, 403)

    def test_approve_reserves_animal(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.put(self.url, {"status": "Approved"}, format="json")
        self.assertEqual(r.status_code, 200, r.data)
        self.assertEqual(r.data["data"]["animal_status"], "Reserved")


class CancelViewTests(AdoptionViewsTestBase):
    def setUp(self):
        super().setUp()
        self.adoption = AdoptionRequest.objects.create(
            animal=self.animal, adopter=self.adopter, status="Approved"
        )
        self.url = f"/api/v1/adoptions/{self.adoption.id}/cancel"

    def test_owner_cancels(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.put(self.url, {}, format="json")
        self.assertEqual(r.status_code, 200, r.data)
        self.assertEqual(r.data["data"]["status"], "Cancelled")

    def test_cancel_stores_comments(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.put(self.url, {"comments": "Moving abroad"}, format="json")
        self.assertEqual(r.status_code, 200, r.data)
        self.adoption.refresh_from_db()
        self.assertEqual(self.adoption.staff_comments, "Moving abroad")

    def test_other_adopter_forbidden(self):
        self.client.force_authenticate(user=self.other_adopter)
        r = self.client.put(self.url, {}, format="json")
        self.assertEqual(r.status_code, 403)
        self.assertEqual(r.data["code"], "FORBIDDEN")

    def test_second_cancel_is_invalid(self):
        self.client.force_authenticate(user=self.staff)
        self.assertEqual(self.client.put(self.url, {}, format="json").status_code, 200)
        r = self.client.put(self.url, {}, format="json")
        self.assertEqual(r.status_code, 422)
        self.assertEqual(r.data["code"], "INVALID_TRANSITION")


class ReadViewTests(AdoptionViewsTestBase):
    def setUp(self):
        super().setUp()
        self.mine = AdoptionRequest.objects.create(
            animal=self.animal, adopter=self.adopter
        )
        self.theirs = AdoptionRequest.objects.create(
            animal=Animal.objects.create(name="Scout", type="Dog"),
            adopter=self.other_adopter,
        )

    def test_adopter_list_is_scoped(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.get("/api/v1/adoptions")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["count"], 1)
        self.assertEqual(r.data["results"][0]["id"], self.mine.id)

    def test_staff_list_filters_by_status(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.get("/api/v1/adoptions", {"status": "Pending"})
        self.assertEqual(r.data["count"], 2)
        r = self.client.get("/api/v1/adoptions", {"status": "Nope"})
        self.assertEqual(r.status_code, 422)

    def test_adopter_cannot_read_others_request(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.get(f"/api/v1/adoptions/{self.theirs.id}")
        self.assertEqual(r.status_code, 403)
        r = self.client.get(f"/api/v1/adoptions/{self.mine.id}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["data"]["id"], self.mine.id)

    def test_statistics_staff_only(self):
        self.client.force_authenticate(user=self.adopter)
        self.assertEqual(
            self.client.get("/api/v1/adoptions/stats/summary").status_code, 403
        )
        self.client.force_authenticate(user=self.staff)
        r = self.client.get("/api/v1/adoptions/stats/summary")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["data"]["total"], 2)
        self.assertEqual(r.data["data"]["by_status"]["Pending"], 2)

    def test_animal_history(self):
        self.client.force_authenticate(user=self.staff)
        r = self.client.get(f"/api/v1/adoptions/animal/{self.animal.id}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual([row["id"] for row in r.data["results"]], [self.mine.id])

    def test_user_history_self_or_staff(self):
        self.client.force_authenticate(user=self.adopter)
        r = self.client.get(f"/api/v1/adoptions/user/{self.adopter.id}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["count"], 1)
        r = self.client.get(f"/api/v1/adoptions/user/{self.other_adopter.id}")
        self.assertEqual(r.status_code, 403)
