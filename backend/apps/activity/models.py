"""
ActivityLog model - immutable chronological record of user actions.

Activity logs are append-only. No update or delete operations, neither
per instance nor in bulk through the default manager.
"""

from django.db import models


class AppendOnlyQuerySet(models.QuerySet):
    """QuerySet that refuses bulk mutation of existing rows."""

    def update(self, **kwargs):
        raise ValueError("ActivityLog entries are append-only. Updates are not allowed.")

    def delete(self):
        raise ValueError(
            "ActivityLog entries are append-only. Deletions are not allowed."
        )


class ActivityLog(models.Model):
    """ActivityLog model - append-only audit trail."""

    actor = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="activity_logs",
    )
    action_type = models.CharField(max_length=50)
    description = models.TextField(blank=True, default="")
    entity_type = models.CharField(max_length=50, null=True, blank=True)
    entity_id = models.CharField(max_length=64, null=True, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    request_id = models.CharField(max_length=64, null=True, blank=True)
    occurred_at = models.DateTimeField(auto_now_add=True)

    objects = AppendOnlyQuerySet.as_manager()

    class Meta:
        db_table = "activity_logs"
        indexes = [
            models.Index(fields=["entity_type", "entity_id"], name="idx_activity_entity"),
            models.Index(fields=["occurred_at"], name="idx_activity_occurred"),
            models.Index(fields=["actor"], name="idx_activity_actor"),
            models.Index(fields=["action_type"], name="idx_activity_action"),
        ]
        ordering = ["-occurred_at", "-id"]

    def __str__(self):
        return f"{self.action_type} by {self.actor_id} at {self.occurred_at}"

    def save(self, *args, **kwargs):
        """Override save to prevent updates."""
        if self.pk and ActivityLog.objects.filter(pk=self.pk).exists():
            raise ValueError(
                "ActivityLog entries are append-only. Updates are not allowed."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Override delete to prevent deletion."""
        raise ValueError(
            "ActivityLog entries are append-only. Deletions are not allowed."
        )
