"""
Application layer - queues notifications inside the caller's transaction.
"""

from .models import Notification


def notify_supplier_owner(
    *, supplier, event_type: str, triggered_by=None, message: str = ""
) -> Notification:
    """Queue an in-app notification for the principal owning a supplier."""
    return Notification.objects.create(
        entity_type=Notification.EntityType.SUPPLIER,
        entity_id=supplier.id,
        event_type=event_type,
        triggered_by=triggered_by,
        recipient_id=supplier.user_id,
        payload={
            "company_name": supplier.company_name,
            "status": supplier.status,
            "message": message,
        },
    )
