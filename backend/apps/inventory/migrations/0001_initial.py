# Initial InventoryItem model.

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="InventoryItem",
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
                ("item_name", models.CharField(max_length=100)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Medical", "Medical"),
                            ("Food", "Food"),
                            ("Cleaning", "Cleaning"),
                            ("Supplies", "Supplies"),
                        ],
                        max_length=20,
                    ),
                ),
                ("quantity_on_hand", models.IntegerField(default=0)),
                ("reorder_level", models.IntegerField(default=10)),
                ("expiration_date", models.DateField(blank=True, null=True)),
                (
                    "supplier_name",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                ("last_updated", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "inventory_items",
                "ordering": ["item_name", "id"],
                "indexes": [
                    models.Index(fields=["category"], name="idx_inventory_category"),
                    models.Index(
                        fields=["expiration_date"], name="idx_inventory_expiration"
                    ),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            (
                                "category__in",
                                ["Medical", "Food", "Cleaning", "Supplies"],
                            )
                        ),
                        name="valid_inventory_category",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("quantity_on_hand__gte", 0)),
                        name="inventory_quantity_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("reorder_level__gte", 0)),
                        name="inventory_reorder_level_non_negative",
                    ),
                ],
            },
        ),
    ]
