from django.test import TestCase
from rest_framework.test import APIClient

from shelter.exceptions import NotFoundError, ValidationError
from apps.animals.models import Animal
from apps.animals.services import get_animal, set_animal_status
from apps.users.models import User


class AnimalServiceTests(TestCase):
    def setUp(self):
        self.animal = Animal.objects.create(name="Olive", type="Dog", breed="Lab")

    def test_defaults(self):
        self.assertEqual(self.animal.current_status, "Available")
        self.assertFalse(self.animal.is_deleted)

    def test_get_animal_skips_deleted(self):
        self.assertEqual(get_animal(self.animal.id), self.animal)
        self.animal.is_deleted = True
        self.animal.save()
        with self.assertRaises(NotFoundError):
            get_animal(self.animal.id)

    def test_get_animal_bad_id(self):
        with self.assertRaises(NotFoundError):
            get_animal("abc")

    def test_set_animal_status(self):
        previous, new = set_animal_status(self.animal, "Quarantine")
        self.assertEqual((previous, new), ("Available", "Quarantine"))
        self.animal.refresh_from_db()
        self.assertEqual(self.animal.current_status, "Quarantine")

    def test_set_animal_status_rejects_unknown(self):
        with self.assertRaises(ValidationError):
            set_animal_status(self.animal, "Lost")


class AnimalViewTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.vet = User.objects.create_user(
            username="animal_vet", password="testpass123", role="VETERINARIAN"
        )
        self.client.force_authenticate(self.vet)
        self.dog = Animal.objects.create(name="Bolt", type="Dog", breed="Collie")
        self.cat = Animal.objects.create(
            name="Nala", type="Cat", current_status="In Treatment"
        )
        Animal.objects.create(name="Ghost", type="Dog", is_deleted=True)

    def test_list_excludes_deleted(self):
        r = self.client.get("/api/v1/animals")
        self.assertEqual(r.status_code, 200)
        self.assertEqual([a["name"] for a in r.data["results"]], ["Bolt", "Nala"])

    def test_list_filters(self):
        r = self.client.get("/api/v1/animals", {"status": "In Treatment"})
        self.assertEqual(r.data["count"], 1)
        r = self.client.get("/api/v1/animals", {"search": "collie"})
        self.assertEqual(r.data["results"][0]["id"], self.dog.id)
        r = self.client.get("/api/v1/animals", {"status": "Missing"})
        self.assertEqual(r.status_code, 422)

    def test_detail(self):
        r = self.client.get(f"/api/v1/animals/{self.cat.id}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["data"]["current_status"], "In Treatment")
        r = self.client.get("/api/v1/animals/999999")
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data["code"], "NOT_FOUND")
