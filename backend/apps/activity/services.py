"""
Activity service - appends immutable activity log entries.

All entries are append-only. No updates or deletions.
"""

import logging

from apps.activity.models import ActivityLog
from shelter.middleware import get_client_ip, get_current_request_id

logger = logging.getLogger(__name__)


def log_activity(
    actor_id,
    action_type,
    description="",
    entity_type=None,
    entity_id=None,
    request=None,
):
    """
    Append an activity log entry.

    Args:
        actor_id: User identifier (None for system or anonymous events)
        action_type: Action classification (e.g. 'PROCESS_ADOPTION')
        description: Free-text description
        entity_type: Type of affected entity (e.g. 'AdoptionRequest')
        entity_id: Identifier of affected entity
        request: Optional HTTP request, used for client IP

    Returns:
        ActivityLog: Created entry
    """
    from apps.users.models import User

    if actor_id and not User.objects.filter(id=actor_id).exists():
        # Actor may have been deleted; the action is still recorded
        actor_id = None

    entry = ActivityLog.objects.create(
        actor_id=actor_id,
        action_type=action_type,
        description=description or "",
        entity_type=entity_type,
        entity_id=str(entity_id) if entity_id is not None else None,
        ip_address=get_client_ip(request),
        request_id=get_current_request_id(),
    )

    logger.debug(
        "activity_logged",
        extra={"operation": action_type, "entity_id": entry.entity_id},
    )
    return entry
