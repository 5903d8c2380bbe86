"""
Data models for the audit app.
Append-only trail of supplier lifecycle transitions and tag mutations.
"""

from django.db import models
from django.conf import settings


class AppendOnlyError(Exception):
    """Raised on any attempt to modify or remove an audit record."""

    pass


class AuditRecordQuerySet(models.QuerySet):
    """Bulk update/delete are refused for audit rows."""

    def update(self, **kwargs):
        raise AppendOnlyError("Audit records cannot be updated.")

    def delete(self):
        raise AppendOnlyError("Audit records cannot be deleted.")


class AuditRecord(models.Model):
    """Immutable entry written on every transition and tag change."""

    class Action(models.TextChoices):
        APPROVE = "approve", "Approve"
        REJECT = "reject", "Reject"
        SUSPEND = "suspend", "Suspend"
        RESTORE = "restore", "Restore"
        DELETE = "delete", "Delete"
        SET_RECOMMENDED = "set_recommended", "Set recommended"
        CLEAR_RECOMMENDED = "clear_recommended", "Clear recommended"
        SET_BLACKLISTED = "set_blacklisted", "Set blacklisted"
        CLEAR_BLACKLISTED = "clear_blacklisted", "Clear blacklisted"
        SET_OBJECTION = "set_objection", "Set objection"
        CLEAR_OBJECTION = "clear_objection", "Clear objection"

    # Polymorphic link, no FK: records outlive the target row
    target_table = models.CharField(max_length=64)
    target_id = models.BigIntegerField()

    action = models.CharField(max_length=32, choices=Action.choices)
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="audit_records",
    )
    reason = models.TextField(blank=True, null=True)
    snapshot = models.JSONField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AuditRecordQuerySet.as_manager()

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["target_table", "target_id"],
                name="ix_audit_target",
            )
        ]

    def save(self, *args, **kwargs):
        if self.pk is not None and not self._state.adding:
            raise AppendOnlyError("Audit records cannot be updated.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise AppendOnlyError("Audit records cannot be deleted.")

    def __str__(self):
        return f"{self.action} on {self.target_table} {self.target_id}"
