"""
Serializers for ActivityLog model.
"""

from rest_framework import serializers
from apps.activity.models import ActivityLog


class ActivityLogSerializer(serializers.ModelSerializer):
    """Serializer for ActivityLog."""

    actor_id = serializers.IntegerField(read_only=True, allow_null=True)
    actor_username = serializers.CharField(
        source="actor.username", read_only=True, default=None
    )

    class Meta:
        model = ActivityLog
        fields = [
            "id",
            "actor_id",
            "actor_username",
            "action_type",
            "description",
            "entity_type",
            "entity_id",
            "ip_address",
            "request_id",
            "occurred_at",
        ]
        read_only_fields = fields
