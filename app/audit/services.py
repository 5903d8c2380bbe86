"""
Application layer - writes and reads the append-only audit trail.
Callers own the transaction; the record is added to it.
"""

from .models import AuditRecord


def record(
    *,
    target_table: str,
    target_id: int,
    action: str,
    actor=None,
    reason: str = None,
    snapshot: dict = None,
) -> AuditRecord:
    """Append one audit record."""
    return AuditRecord.objects.create(
        target_table=target_table,
        target_id=target_id,
        action=action,
        actor=actor,
        reason=reason,
        snapshot=snapshot,
    )


def get_trail(*, target_table: str, target_id: int):
    """Records for one target, oldest first."""
    return AuditRecord.objects.filter(
        target_table=target_table, target_id=target_id
    ).select_related("actor")
