"""
Django admin for the audit trail (read-only).
"""

from django.contrib import admin

from .models import AuditRecord


@admin.register(AuditRecord)
class AuditRecordAdmin(admin.ModelAdmin):
    """Audit records can be browsed, never edited."""

    list_display = (
        "id",
        "target_table",
        "target_id",
        "action",
        "actor",
        "created_at",
    )
    list_filter = ("action", "target_table", "created_at")
    search_fields = ("target_id", "reason", "actor__email")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
