"""
Serializers for InventoryItem and its alert classifications.
"""

from rest_framework import serializers
from apps.inventory.models import InventoryItem


class InventoryItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = InventoryItem
        fields = [
            "id",
            "item_name",
            "category",
            "quantity_on_hand",
            "reorder_level",
            "expiration_date",
            "supplier_name",
            "last_updated",
        ]
        read_only_fields = fields


class LowStockItemSerializer(InventoryItemSerializer):
    shortage = serializers.IntegerField(read_only=True)
    stock_percentage = serializers.FloatField(read_only=True, allow_null=True)

    class Meta(InventoryItemSerializer.Meta):
        fields = InventoryItemSerializer.Meta.fields + ["shortage", "stock_percentage"]
        read_only_fields = fields


class ExpiringItemSerializer(InventoryItemSerializer):
    days_until_expiry = serializers.IntegerField(read_only=True)

    class Meta(InventoryItemSerializer.Meta):
        fields = InventoryItemSerializer.Meta.fields + ["days_until_expiry"]
        read_only_fields = fields


class ExpiredItemSerializer(InventoryItemSerializer):
    days_expired = serializers.IntegerField(read_only=True)

    class Meta(InventoryItemSerializer.Meta):
        fields = InventoryItemSerializer.Meta.fields + ["days_expired"]
        read_only_fields = fields


class AdjustStockSerializer(serializers.Serializer):
    operation = serializers.ChoiceField(choices=["add", "subtract"])
    amount = serializers.IntegerField(min_value=1)
    reason = serializers.CharField(required=False, allow_blank=True, default="")
