"""
Animal model - animals in the shelter's care.

current_status is the only field the adoption workflow mutates.
"""

from django.db import models


class AnimalStatus(models.TextChoices):
    AVAILABLE = "Available"
    RESERVED = "Reserved"
    ADOPTED = "Adopted"
    IN_TREATMENT = "In Treatment"
    QUARANTINE = "Quarantine"
    DECEASED = "Deceased"
    RECLAIMED = "Reclaimed"


class Animal(models.Model):
    """Animal model."""

    TYPE_CHOICES = [
        ("Dog", "Dog"),
        ("Cat", "Cat"),
        ("Other", "Other"),
    ]
    GENDER_CHOICES = [
        ("Male", "Male"),
        ("Female", "Female"),
        ("Unknown", "Unknown"),
    ]

    name = models.CharField(max_length=100)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    breed = models.CharField(max_length=100, blank=True, default="")
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, default="Unknown")
    age_group = models.CharField(max_length=30, blank=True, default="")
    intake_date = models.DateTimeField(null=True, blank=True)
    current_status = models.CharField(
        max_length=20,
        choices=AnimalStatus.choices,
        default=AnimalStatus.AVAILABLE,
    )
    is_deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "animals"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(current_status__in=AnimalStatus.values),
                name="valid_animal_status",
            ),
        ]
        indexes = [
            models.Index(fields=["current_status"], name="idx_animal_status"),
        ]

    def __str__(self):
        return f"{self.name} ({self.current_status})"
