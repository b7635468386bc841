"""
Inventory domain model: InventoryItem.
"""

from django.db import models


class InventoryCategory(models.TextChoices):
    MEDICAL = "Medical"
    FOOD = "Food"
    CLEANING = "Cleaning"
    SUPPLIES = "Supplies"


DEFAULT_REORDER_LEVEL = 10


class InventoryItem(models.Model):
    """Stock-tracked shelter supply item."""

    item_name = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=InventoryCategory.choices)
    quantity_on_hand = models.IntegerField(default=0)
    reorder_level = models.IntegerField(default=DEFAULT_REORDER_LEVEL)
    expiration_date = models.DateField(null=True, blank=True)
    supplier_name = models.CharField(max_length=100, blank=True, default="")
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_items"
        ordering = ["item_name", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(category__in=InventoryCategory.values),
                name="valid_inventory_category",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity_on_hand__gte=0),
                name="inventory_quantity_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(reorder_level__gte=0),
                name="inventory_reorder_level_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["category"], name="idx_inventory_category"),
            models.Index(fields=["expiration_date"], name="idx_inventory_expiration"),
        ]

    def __str__(self):
        return f"{self.item_name} ({self.quantity_on_hand})"
