"""
Serializers for audit records.
"""

from rest_framework import serializers

from .models import AuditRecord


class AuditRecordSerializer(serializers.ModelSerializer):
    """Read-only serializer for audit trail entries."""

    actor = serializers.EmailField(source="actor.email", default=None)

    class Meta:
        model = AuditRecord
        fields = [
            "id",
            "target_table",
            "target_id",
            "action",
            "actor",
            "reason",
            "snapshot",
            "created_at",
        ]
        read_only_fields = fields
