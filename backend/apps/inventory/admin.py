from django.contrib import admin

from apps.inventory.models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "item_name",
        "category",
        "quantity_on_hand",
        "reorder_level",
        "expiration_date",
    )
    list_filter = ("category",)
    search_fields = ("item_name", "supplier_name")
