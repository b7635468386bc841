"""
Inventory API views.

Staff and admins only. Stock changes flow through adjust_stock.
"""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.response import Response

from shelter.permissions import IsStaffOrAdmin
from apps.inventory import services
from apps.inventory.serializers import (
    AdjustStockSerializer,
    ExpiredItemSerializer,
    ExpiringItemSerializer,
    InventoryItemSerializer,
    LowStockItemSerializer,
)


def _success(message, data):
    return Response(
        {"success": True, "message": message, "data": data}, status=status.HTTP_200_OK
    )


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def list_inventory(request):
    """
    GET /api/v1/inventory

    Filters: category.
    """
    queryset = services.list_items(request.query_params.get("category"))

    paginator = LimitOffsetPagination()
    paginator.default_limit = 50
    paginator.max_limit = 100

    page = paginator.paginate_queryset(queryset, request)
    serializer = InventoryItemSerializer(page, many=True)

    return paginator.get_paginated_response(serializer.data)


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def get_inventory_item(request, itemId):
    """
    GET /api/v1/inventory/{itemId}
    """
    item = services.get_item(itemId)
    return _success("Inventory item retrieved", InventoryItemSerializer(item).data)


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def inventory_alerts(request):
    """
    GET /api/v1/inventory/alerts?expiry_days=N
    """
    alerts = services.get_alerts(request.query_params.get("expiry_days"))
    data = {
        "out_of_stock": InventoryItemSerializer(alerts["out_of_stock"], many=True).data,
        "low_stock": LowStockItemSerializer(alerts["low_stock"], many=True).data,
        "expiring_soon": ExpiringItemSerializer(alerts["expiring_soon"], many=True).data,
        "expired": ExpiredItemSerializer(alerts["expired"], many=True).data,
        "summary": alerts["summary"],
    }
    return _success("Inventory alerts retrieved", data)


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def low_stock(request):
    """
    GET /api/v1/inventory/low-stock
    """
    items = services.get_low_stock()
    return _success("Low stock items retrieved", LowStockItemSerializer(items, many=True).data)


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def expiring(request):
    """
    GET /api/v1/inventory/expiring?days=N
    """
    items = services.get_expiring(request.query_params.get("days"))
    return _success("Expiring items retrieved", ExpiringItemSerializer(items, many=True).data)


@api_view(["GET"])
@permission_classes([IsStaffOrAdmin])
def inventory_statistics(request):
    """
    GET /api/v1/inventory/stats/summary
    """
    return _success("Inventory statistics retrieved", services.get_statistics())


@api_view(["PATCH"])
@permission_classes([IsStaffOrAdmin])
def adjust_stock(request, itemId):
    """
    PATCH /api/v1/inventory/{itemId}/adjust

    Body: operation (add|subtract), amount (positive integer), reason.
    """
    serializer = AdjustStockSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    item = services.adjust_stock(
        itemId,
        data["operation"],
        data["amount"],
        request.user.id,
        reason=data.get("reason", ""),
        request=request,
    )
    return _success("Stock adjusted successfully", InventoryItemSerializer(item).data)
