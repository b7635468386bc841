"""
Adoption domain model: AdoptionRequest.

One adopter's application for one animal, tracked from submission to a
terminal status. Rows are never deleted; cancellation is a status.
"""

from django.db import models
from django.utils import timezone


class AdoptionStatus(models.TextChoices):
    PENDING = "Pending"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class AdoptionRequest(models.Model):
    """AdoptionRequest model - mutated only through adoptions.services."""

    animal = models.ForeignKey(
        "animals.Animal", on_delete=models.PROTECT, related_name="adoption_requests"
    )
    adopter = models.ForeignKey(
        "users.User", on_delete=models.PROTECT, related_name="adoption_requests"
    )
    status = models.CharField(
        max_length=20,
        choices=AdoptionStatus.choices,
        default=AdoptionStatus.PENDING,
    )
    request_date = models.DateTimeField(default=timezone.now)
    interview_date = models.DateTimeField(null=True, blank=True)
    staff_comments = models.TextField(null=True, blank=True)
    processed_by = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="processed_adoption_requests",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "adoption_requests"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=AdoptionStatus.values),
                name="valid_adoption_status",
            ),
            # interview_date NOT NULL while status is Interview Scheduled
            models.CheckConstraint(
                condition=~models.Q(status="Interview Scheduled")
                | models.Q(interview_date__isnull=False),
                name="interview_date_set_when_scheduled",
            ),
        ]
        indexes = [
            models.Index(fields=["status"], name="idx_adoption_status"),
            models.Index(fields=["animal", "status"], name="idx_adoption_animal_status"),
            models.Index(fields=["adopter"], name="idx_adoption_adopter"),
            models.Index(fields=["request_date"], name="idx_adoption_request_date"),
        ]

    def __str__(self):
        return f"Request {self.pk}: animal {self.animal_id} ({self.status})"
