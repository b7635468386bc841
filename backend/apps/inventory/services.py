"""
Inventory services - stock level and expiry classification.

Classification is read-only; adjust_stock is the only mutation and runs
under a row lock like every other write in the shelter backend.
"""

import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.db.models import Count, F, Q, Sum, Value
from django.db.models.functions import Greatest
from django.utils import timezone

from shelter.exceptions import NotFoundError, ValidationError
from shelter.middleware import get_current_request_id
from apps.activity.services import log_activity
from apps.inventory.models import InventoryCategory, InventoryItem

logger = logging.getLogger(__name__)

ADJUST_OPERATIONS = ("add", "subtract")

MAX_WINDOW_DAYS = 3650


def parse_days(value, field="days"):
    """
    Validate a look-ahead window in days.

    None or "" falls back to INVENTORY_DEFAULT_EXPIRY_DAYS.

    Raises:
        ValidationError: If value is not an integer in 0..MAX_WINDOW_DAYS
    """
    if value is None or value == "":
        return settings.INVENTORY_DEFAULT_EXPIRY_DAYS

    message = f"{field} must be an integer between 0 and {MAX_WINDOW_DAYS}"
    if isinstance(value, bool):
        raise ValidationError(message, {field: [value]})
    if isinstance(value, int):
        days = value
    else:
        text = str(value).strip()
        try:
            days = int(text)
        except ValueError:
            raise ValidationError(message, {field: [text]})

    if days < 0 or days > MAX_WINDOW_DAYS:
        raise ValidationError(message, {field: [days]})
    return days


def _stock_percentage(item):
    if not item.reorder_level:
        return None
    return round(item.quantity_on_hand / item.reorder_level * 100, 1)


def list_items(category=None):
    queryset = InventoryItem.objects.all()
    if category:
        if category not in InventoryCategory.values:
            raise ValidationError(
                "Invalid category",
                {"category": [f"Must be one of: {', '.join(InventoryCategory.values)}"]},
            )
        queryset = queryset.filter(category=category)
    return queryset


def get_item(item_id, for_update=False):
    queryset = InventoryItem.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=item_id)
    except (InventoryItem.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(f"Inventory item {item_id} does not exist")


def get_out_of_stock():
    return list(InventoryItem.objects.filter(quantity_on_hand__lte=0))


def get_low_stock():
    """
    Items at or below their reorder level, largest shortage first.

    Each item carries shortage (never negative) and stock_percentage
    (None when the reorder level is zero).
    """
    items = list(
        InventoryItem.objects.filter(quantity_on_hand__lte=F("reorder_level"))
        .annotate(
            shortage=Greatest(F("reorder_level") - F("quantity_on_hand"), Value(0))
        )
        .order_by("-shortage", "item_name", "id")
    )
    for item in items:
        item.stock_percentage = _stock_percentage(item)
    return items


def get_expiring(within_days=None, today=None):
    """
    Items expiring between today and today + within_days, inclusive,
    soonest first. Each item carries days_until_expiry.

    Raises:
        ValidationError: If within_days is not a non-negative integer
    """
    days = parse_days(within_days)
    today = today or timezone.localdate()

    items = list(
        InventoryItem.objects.filter(
            expiration_date__isnull=False,
            expiration_date__gte=today,
            expiration_date__lte=today + timedelta(days=days),
        ).order_by("expiration_date", "item_name", "id")
    )
    for item in items:
        item.days_until_expiry = (item.expiration_date - today).days
    return items


def get_expired(today=None):
    """Items past their expiration date, oldest first, with days_expired."""
    today = today or timezone.localdate()

    items = list(
        InventoryItem.objects.filter(
            expiration_date__isnull=False, expiration_date__lt=today
        ).order_by("expiration_date", "item_name", "id")
    )
    for item in items:
        item.days_expired = (today - item.expiration_date).days
    return items


def get_alerts(expiry_days=None, today=None):
    """
    All inventory alerts in one structure.

    Returns:
        dict: out_of_stock, low_stock, expiring_soon, expired lists plus
            a summary of counts
    """
    days = parse_days(expiry_days, field="expiry_days")
    today = today or timezone.localdate()

    alerts = {
        "out_of_stock": get_out_of_stock(),
        "low_stock": get_low_stock(),
        "expiring_soon": get_expiring(days, today=today),
        "expired": get_expired(today=today),
    }
    alerts["summary"] = {
        "out_of_stock_count": len(alerts["out_of_stock"]),
        "low_stock_count": len(alerts["low_stock"]),
        "expiring_count": len(alerts["expiring_soon"]),
        "expired_count": len(alerts["expired"]),
    }
    return alerts


def get_statistics(today=None):
    today = today or timezone.localdate()
    horizon = today + timedelta(days=settings.INVENTORY_DEFAULT_EXPIRY_DAYS)

    category_counts = {
        f"{choice.name.lower()}_items": Count("id", filter=Q(category=choice.value))
        for choice in InventoryCategory
    }
    totals = InventoryItem.objects.aggregate(
        total_items=Count("id"),
        total_quantity=Sum("quantity_on_hand"),
        low_stock_count=Count(
            "id",
            filter=Q(quantity_on_hand__gt=0, quantity_on_hand__lte=F("reorder_level")),
        ),
        out_of_stock_count=Count("id", filter=Q(quantity_on_hand__lte=0)),
        expired_count=Count("id", filter=Q(expiration_date__lt=today)),
        expiring_soon_count=Count(
            "id",
            filter=Q(expiration_date__gte=today, expiration_date__lte=horizon),
        ),
        **category_counts,
    )
    totals["total_quantity"] = totals["total_quantity"] or 0
    return totals


def adjust_stock(item_id, operation, amount, actor_id, reason="", request=None):
    """
    Add to or subtract from an item's quantity on hand.

    Args:
        item_id: InventoryItem identifier
        operation: "add" or "subtract"
        amount: Positive integer
        actor_id: User identifier
        reason: Free-text reason, recorded on the activity log
        request: Optional HTTP request, recorded on the activity log

    Returns:
        InventoryItem: Updated item

    Raises:
        NotFoundError: If the item does not exist
        ValidationError: If operation or amount is invalid, or subtracting
            more than is on hand
    """
    if operation not in ADJUST_OPERATIONS:
        raise ValidationError(
            "Operation must be add or subtract", {"operation": [str(operation)]}
        )
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValidationError("Amount must be a positive integer", {"amount": [amount]})

    with transaction.atomic():
        item = get_item(item_id, for_update=True)
        previous = item.quantity_on_hand

        if operation == "subtract" and amount > previous:
            raise ValidationError(
                f"Cannot subtract more than current stock ({previous})",
                {"quantity_on_hand": previous, "amount": amount},
            )

        item.quantity_on_hand = previous + amount if operation == "add" else previous - amount
        item.save(update_fields=["quantity_on_hand", "last_updated"])

        log_activity(
            actor_id=actor_id,
            action_type="ADJUST_INVENTORY",
            description=(
                f"Adjusted {item.item_name}: {operation} {amount} "
                f"(was: {previous}, now: {item.quantity_on_hand}). Reason: {reason or ''}"
            ),
            entity_type="InventoryItem",
            entity_id=item.id,
            request=request,
        )

    logger.info(
        "inventory_stock_adjusted",
        extra={
            "operation": "ADJUST_INVENTORY",
            "entity_id": str(item.id),
            "request_id": get_current_request_id(),
        },
    )
    return item
