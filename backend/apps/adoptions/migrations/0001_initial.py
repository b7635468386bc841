# Initial AdoptionRequest model.

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("animals", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AdoptionRequest",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Interview Scheduled", "Interview Scheduled"),
                            ("Approved", "Approved"),
                            ("Rejected", "Rejected"),
                            ("Completed", "Completed"),
                            ("Cancelled", "Cancelled"),
                        ],
                        default="Pending",
                        max_length=20,
                    ),
                ),
                (
                    "request_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("interview_date", models.DateTimeField(blank=True, null=True)),
                ("staff_comments", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "adopter",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="adoption_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "animal",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="adoption_requests",
                        to="animals.animal",
                    ),
                ),
                (
                    "processed_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="processed_adoption_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "adoption_requests",
                "indexes": [
                    models.Index(fields=["status"], name="idx_adoption_status"),
                    models.Index(
                        fields=["animal", "status"], name="idx_adoption_animal_status"
                    ),
                    models.Index(fields=["adopter"], name="idx_adoption_adopter"),
                    models.Index(
                        fields=["request_date"], name="idx_adoption_request_date"
                    ),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            (
                                "status__in",
                                [
                                    "Pending",
                                    "Interview Scheduled",
                                    "Approved",
                                    "Rejected",
                                    "Completed",
                                    "Cancelled",
                                ],
                            )
                        ),
                        name="valid_adoption_status",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(("status", "Interview Scheduled"), _negated=True),
                            ("interview_date__isnull", False),
                            _connector="OR",
                        ),
                        name="interview_date_set_when_scheduled",
                    ),
                ],
            },
        ),
    ]
