"""
Seed a development database with animals and inventory items.

Idempotent: rows are matched by name. Run: python manage.py seed_shelter
"""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.animals.models import Animal
from apps.inventory.models import InventoryItem

ANIMALS = [
    ("Rex", "Dog", "German Shepherd", "Male", "Adult"),
    ("Bella", "Dog", "Labrador", "Female", "Puppy"),
    ("Milo", "Cat", "Tabby", "Male", "Senior"),
    ("Luna", "Cat", "Siamese", "Female", "Adult"),
    ("Pip", "Other", "Rabbit", "Unknown", "Young"),
]

# name, category, on hand, reorder level, days until expiry
INVENTORY = [
    ("Rabies vaccine", "Medical", 2, 10, 20),
    ("Bandages", "Medical", 7, 10, None),
    ("Dry dog food (kg)", "Food", 120, 40, 180),
    ("Wet cat food (cans)", "Food", 0, 24, 90),
    ("Disinfectant", "Cleaning", 15, 5, None),
    ("Dewormer", "Medical", 30, 10, -3),
    ("Leashes", "Supplies", 12, 10, None),
]


class Command(BaseCommand):
    help = "Create demo animals and inventory items"

    def handle(self, *args, **options):
        today = timezone.localdate()
        now = timezone.now()

        created = 0
        for name, kind, breed, gender, age_group in ANIMALS:
            _, was_created = Animal.objects.get_or_create(
                name=name,
                defaults={
                    "type": kind,
                    "breed": breed,
                    "gender": gender,
                    "age_group": age_group,
                    "intake_date": now,
                },
            )
            created += was_created

        for name, category, quantity, reorder, expires_in in INVENTORY:
            _, was_created = InventoryItem.objects.get_or_create(
                item_name=name,
                defaults={
                    "category": category,
                    "quantity_on_hand": quantity,
                    "reorder_level": reorder,
                    "expiration_date": (
                        today + timedelta(days=expires_in)
                        if expires_in is not None
                        else None
                    ),
                },
            )
            created += was_created

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} new rows"))
