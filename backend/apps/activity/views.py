"""
Activity log views - query activity log entries.

Read-only - activity logs are append-only.
"""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import LimitOffsetPagination
from django.utils.dateparse import parse_datetime
from shelter.exceptions import ValidationError
from shelter.permissions import IsAdmin
from apps.activity.models import ActivityLog
from apps.activity.serializers import ActivityLogSerializer


def _parse_bound(value, name):
    try:
        parsed = parse_datetime(value)
    except (ValueError, TypeError):
        parsed = None
    if parsed is None:
        raise ValidationError(f"Invalid {name} format (use ISO 8601)")
    return parsed


@api_view(["GET"])
@permission_classes([IsAdmin])
def query_activity_log(request):
    """
    GET /api/v1/activity-logs

    Query activity log entries with optional filters:
    action_type, actor_id, entity_type, entity_id, from_date, to_date.
    """
    params = request.query_params
    queryset = ActivityLog.objects.select_related("actor")

    if params.get("action_type"):
        queryset = queryset.filter(action_type=params["action_type"])

    if params.get("actor_id"):
        try:
            queryset = queryset.filter(actor_id=int(params["actor_id"]))
        except ValueError:
            raise ValidationError("Invalid actor_id format")

    if params.get("entity_type"):
        queryset = queryset.filter(entity_type=params["entity_type"])

    if params.get("entity_id"):
        queryset = queryset.filter(entity_id=params["entity_id"])

    if params.get("from_date"):
        queryset = queryset.filter(
            occurred_at__gte=_parse_bound(params["from_date"], "from_date")
        )

    if params.get("to_date"):
        queryset = queryset.filter(
            occurred_at__lte=_parse_bound(params["to_date"], "to_date")
        )

    queryset = queryset.order_by("-occurred_at", "-id")

    paginator = LimitOffsetPagination()
    paginator.default_limit = 50
    paginator.max_limit = 100

    page = paginator.paginate_queryset(queryset, request)
    serializer = ActivityLogSerializer(page, many=True)

    return paginator.get_paginated_response(serializer.data)
