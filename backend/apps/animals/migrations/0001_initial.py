# Initial Animal model.

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Animal",
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
                ("name", models.CharField(max_length=100)),
                (
                    "type",
                    models.CharField(
                        choices=[("Dog", "Dog"), ("Cat", "Cat"), ("Other", "Other")],
                        max_length=20,
                    ),
                ),
                ("breed", models.CharField(blank=True, default="", max_length=100)),
                (
                    "gender",
                    models.CharField(
                        choices=[
                            ("Male", "Male"),
                            ("Female", "Female"),
                            ("Unknown", "Unknown"),
                        ],
                        default="Unknown",
                        max_length=10,
                    ),
                ),
                ("age_group", models.CharField(blank=True, default="", max_length=30)),
                ("intake_date", models.DateTimeField(blank=True, null=True)),
                (
                    "current_status",
                    models.CharField(
                        choices=[
                            ("Available", "Available"),
                            ("Reserved", "Reserved"),
                            ("Adopted", "Adopted"),
                            ("In Treatment", "In Treatment"),
                            ("Quarantine", "Quarantine"),
                            ("Deceased", "Deceased"),
                            ("Reclaimed", "Reclaimed"),
                        ],
                        default="Available",
                        max_length=20,
                    ),
                ),
                ("is_deleted", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "animals",
                "indexes": [
                    models.Index(fields=["current_status"], name="idx_animal_status"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            (
                                "current_status__in",
                                [
                                    "Available",
                                    "Reserved",
                                    "Adopted",
                                    "In Treatment",
                                    "Quarantine",
                                    "Deceased",
                                    "Reclaimed",
                                ],
                            )
                        ),
                        name="valid_animal_status",
                    ),
                ],
            },
        ),
    ]
