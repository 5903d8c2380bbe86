"""
Application layer - Django-aware orchestrator for supplier objects.
Locks the supplier row, calls Domain for transition validation, writes
the new state, the audit record and queued notifications in one
transaction. Also covers reputation tags and department library links.
"""

import json
import logging

from django.conf import settings
from django.core import serializers as django_serializers
from django.db import transaction
from django.db.models import Count, Q
from django.utils import timezone

from audit import services as audit_services
from audit.models import AuditRecord
from core.exceptions import NotFound, ValidationError, InvalidTransitionError
from notifications import services as notification_services
from notifications.models import Notification
from references.models import Terminal
from users import services as user_services
from .filters import SupplierFilter
from .models import Supplier, DepartmentSupplierLink
from .workflows import validate_transition

logger = logging.getLogger(__name__)

TARGET_TABLE = "suppliers"


# --- Helpers ---


def _lock_supplier(supplier_id) -> Supplier:
    """Fetches the supplier row with a write lock for the transaction."""
    try:
        return Supplier.objects.select_for_update().get(pk=supplier_id)
    except Supplier.DoesNotExist:
        raise NotFound(f"Supplier '{supplier_id}' does not exist.")


def _get_supplier(supplier_id) -> Supplier:
    try:
        return Supplier.objects.get(pk=supplier_id)
    except Supplier.DoesNotExist:
        raise NotFound(f"Supplier '{supplier_id}' does not exist.")


def _require_reason(reason) -> str:
    reason = (reason or "").strip()
    if not reason:
        raise ValidationError(
            "A reason is required.", fields={"reason": "Required."}
        )
    return reason


def _audit(supplier_id, action, actor, reason=None, snapshot=None):
    return audit_services.record(
        target_table=TARGET_TABLE,
        target_id=supplier_id,
        action=action,
        actor=actor,
        reason=reason,
        snapshot=snapshot,
    )


def _snapshot(supplier: Supplier) -> dict:
    """The supplier row as a JSON-ready dict."""
    data = json.loads(django_serializers.serialize("json", [supplier]))[0]
    return {"id": supplier.pk, **data["fields"]}


# --- Registration ---


@transaction.atomic
def register_supplier(*, user, supplier_type: str, **profile) -> Supplier:
    """Creates a pending supplier owned by `user`; one per principal."""
    if supplier_type not in Supplier.SupplierType.values:
        raise ValidationError(
            f"Unknown supplier type '{supplier_type}'.",
            fields={"supplier_type": "Invalid choice."},
        )
    if Supplier.objects.filter(user=user).exists():
        raise ValidationError("This account already has a supplier profile.")

    supplier = Supplier.objects.create(
        user=user, supplier_type=supplier_type, **profile
    )
    logger.info("User %s registered supplier %s", user.id, supplier.id)
    return supplier


# --- Lifecycle transitions ---


@transaction.atomic
def approve_supplier(*, supplier_id, actor) -> Supplier:
    """PENDING -> APPROVED; the owner gains the supplier terminal."""
    supplier = _lock_supplier(supplier_id)
    supplier.status = validate_transition(
        from_status=supplier.status, event="approve"
    )
    supplier.approved_at = timezone.now()
    supplier.approved_by = actor
    supplier.rejection_reason = None
    supplier.save()

    user_services.grant_terminal_role(
        user_id=supplier.user_id, terminal=Terminal.SUPPLIER
    )
    _audit(supplier.id, AuditRecord.Action.APPROVE, actor)
    notification_services.notify_supplier_owner(
        supplier=supplier,
        event_type=Notification.EventType.SUPPLIER_APPROVED,
        triggered_by=actor,
    )
    logger.info("User %s approved supplier %s", actor.id, supplier.id)
    return supplier


@transaction.atomic
def reject_supplier(*, supplier_id, actor, reason: str) -> Supplier:
    """PENDING -> REJECTED with a mandatory reason."""
    reason = _require_reason(reason)
    supplier = _lock_supplier(supplier_id)
    supplier.status = validate_transition(
        from_status=supplier.status, event="reject"
    )
    supplier.rejection_reason = reason
    supplier.save()

    _audit(supplier.id, AuditRecord.Action.REJECT, actor, reason=reason)
    notification_services.notify_supplier_owner(
        supplier=supplier,
        event_type=Notification.EventType.SUPPLIER_REJECTED,
        triggered_by=actor,
        message=reason,
    )
    logger.info("User %s rejected supplier %s", actor.id, supplier.id)
    return supplier


@transaction.atomic
def suspend_supplier(*, supplier_id, actor, reason: str = None) -> Supplier:
    """APPROVED -> SUSPENDED; the reason is kept in rejection_reason."""
    reason = _require_reason(reason or settings.PORTAL_DEFAULT_SUSPEND_REASON)
    supplier = _lock_supplier(supplier_id)
    supplier.status = validate_transition(
        from_status=supplier.status, event="suspend"
    )
    supplier.rejection_reason = reason
    supplier.save()

    _audit(supplier.id, AuditRecord.Action.SUSPEND, actor, reason=reason)
    notification_services.notify_supplier_owner(
        supplier=supplier,
        event_type=Notification.EventType.SUPPLIER_SUSPENDED,
        triggered_by=actor,
        message=reason,
    )
    logger.info("User %s suspended supplier %s", actor.id, supplier.id)
    return supplier


@transaction.atomic
def restore_supplier(*, supplier_id, actor) -> Supplier:
    """REJECTED or SUSPENDED -> APPROVED."""
    supplier = _lock_supplier(supplier_id)
    supplier.status = validate_transition(
        from_status=supplier.status, event="restore"
    )
    supplier.rejection_reason = None
    supplier.save()

    _audit(supplier.id, AuditRecord.Action.RESTORE, actor)
    notification_services.notify_supplier_owner(
        supplier=supplier,
        event_type=Notification.EventType.SUPPLIER_RESTORED,
        triggered_by=actor,
    )
    logger.info("User %s restored supplier %s", actor.id, supplier.id)
    return supplier


@transaction.atomic
def delete_supplier(*, supplier_id, actor) -> None:
    """
    Removes the supplier from any status. Contacts, qualifications,
    products and department links cascade; the owner loses the supplier
    terminal. The audit record keeps a snapshot of the deleted row.
    """
    supplier = _lock_supplier(supplier_id)
    validate_transition(from_status=supplier.status, event="delete")

    snapshot = _snapshot(supplier)
    owner_id = supplier.user_id
    supplier.delete()

    user_services.revoke_terminal_role(
        user_id=owner_id, terminal=Terminal.SUPPLIER
    )
    _audit(
        supplier_id, AuditRecord.Action.DELETE, actor, snapshot=snapshot
    )
    logger.info("User %s deleted supplier %s", actor.id, supplier_id)


# --- Reputation tags ---

# tag: (flag, reason field, timestamp field, set action, clear action)
TAGS = {
    "recommended": (
        "is_recommended",
        "recommend_reason",
        "recommended_at",
        AuditRecord.Action.SET_RECOMMENDED,
        AuditRecord.Action.CLEAR_RECOMMENDED,
    ),
    "blacklisted": (
        "is_blacklisted",
        "blacklist_reason",
        "blacklisted_at",
        AuditRecord.Action.SET_BLACKLISTED,
        AuditRecord.Action.CLEAR_BLACKLISTED,
    ),
    "objection": (
        "has_objection",
        "objection_reason",
        "objection_at",
        AuditRecord.Action.SET_OBJECTION,
        AuditRecord.Action.CLEAR_OBJECTION,
    ),
}


def _set_tag(supplier: Supplier, tag: str, actor, reason=None) -> bool:
    """
    Sets a tag. Returns False when it was already set; only the reason
    text may change then, and no audit record is written.
    Never touches `status`.
    """
    flag, reason_field, at_field, set_action, _ = TAGS[tag]

    if getattr(supplier, flag):
        if reason and reason != getattr(supplier, reason_field):
            setattr(supplier, reason_field, reason)
            supplier.save(update_fields=[reason_field, "updated_at"])
        return False

    setattr(supplier, flag, True)
    setattr(supplier, reason_field, reason)
    setattr(supplier, at_field, timezone.now())
    supplier.save(update_fields=[flag, reason_field, at_field, "updated_at"])
    _audit(supplier.id, set_action, actor, reason=reason)
    logger.info("User %s set %s on supplier %s", actor.id, tag, supplier.id)
    return True


def _clear_tag(supplier: Supplier, tag: str, actor) -> bool:
    """Clears a tag. Returns False when it was not set."""
    flag, reason_field, at_field, _, clear_action = TAGS[tag]

    if not getattr(supplier, flag):
        return False

    setattr(supplier, flag, False)
    setattr(supplier, reason_field, None)
    setattr(supplier, at_field, None)
    supplier.save(update_fields=[flag, reason_field, at_field, "updated_at"])
    _audit(supplier.id, clear_action, actor)
    logger.info(
        "User %s cleared %s on supplier %s", actor.id, tag, supplier.id
    )
    return True


@transaction.atomic
def set_recommended(*, supplier_id, actor, reason: str = None) -> Supplier:
    supplier = _lock_supplier(supplier_id)
    _set_tag(supplier, "recommended", actor, (reason or "").strip() or None)
    return supplier


@transaction.atomic
def clear_recommended(*, supplier_id, actor) -> Supplier:
    supplier = _lock_supplier(supplier_id)
    _clear_tag(supplier, "recommended", actor)
    return supplier


@transaction.atomic
def set_blacklisted(*, supplier_id, actor, reason: str) -> Supplier:
    """
    Blacklists without changing `status`. The login collaborator refuses
    tokens to blacklisted suppliers.
    """
    reason = _require_reason(reason)
    supplier = _lock_supplier(supplier_id)
    if _set_tag(supplier, "blacklisted", actor, reason):
        notification_services.notify_supplier_owner(
            supplier=supplier,
            event_type=Notification.EventType.SUPPLIER_BLACKLISTED,
            triggered_by=actor,
            message=reason,
        )
    return supplier


@transaction.atomic
def clear_blacklisted(*, supplier_id, actor) -> Supplier:
    supplier = _lock_supplier(supplier_id)
    _clear_tag(supplier, "blacklisted", actor)
    return supplier


@transaction.atomic
def set_objection(*, supplier_id, actor, reason: str) -> Supplier:
    reason = _require_reason(reason)
    supplier = _lock_supplier(supplier_id)
    _set_tag(supplier, "objection", actor, reason)
    return supplier


@transaction.atomic
def clear_objection(*, supplier_id, actor) -> Supplier:
    supplier = _lock_supplier(supplier_id)
    _clear_tag(supplier, "objection", actor)
    return supplier


# --- Department library ---


def _department_of(context) -> int:
    if context.department_id is None:
        raise ValidationError("You are not affiliated with a department.")
    return context.department_id


@transaction.atomic
def enable_supplier(
    *,
    supplier_id,
    actor,
    context,
    library_type: str = DepartmentSupplierLink.LibraryType.CURRENT,
    reason: str = None,
) -> DepartmentSupplierLink:
    """
    Adds an approved supplier to the caller's department library.
    Enabling an already enabled supplier returns the existing link.
    """
    department_id = _department_of(context)
    supplier = _lock_supplier(supplier_id)
    if supplier.status != Supplier.Status.APPROVED:
        raise InvalidTransitionError(
            f"Only approved suppliers can be enabled; status is "
            f"'{supplier.status}'."
        )

    link, created = DepartmentSupplierLink.objects.get_or_create(
        department_id=department_id,
        supplier=supplier,
        defaults={
            "library_type": library_type
            or DepartmentSupplierLink.LibraryType.CURRENT,
            "reason": reason,
            "created_by": actor,
        },
    )
    if created:
        logger.info(
            "Department %s enabled supplier %s", department_id, supplier.id
        )
    return link


@transaction.atomic
def disable_supplier(*, supplier_id, context) -> bool:
    """Removes the supplier from the caller's department library."""
    department_id = _department_of(context)
    supplier = _get_supplier(supplier_id)
    deleted, _ = DepartmentSupplierLink.objects.filter(
        department_id=department_id, supplier=supplier
    ).delete()
    if deleted:
        logger.info(
            "Department %s disabled supplier %s", department_id, supplier.id
        )
    return bool(deleted)


# --- Read models ---


def list_suppliers(filters: dict = None):
    """Suppliers matching the SupplierFilter parameters, newest first."""
    filterset = SupplierFilter(data=filters or {}, queryset=Supplier.objects.all())
    if not filterset.is_valid():
        raise ValidationError(
            "Invalid filter.",
            fields={k: " ".join(v) for k, v in filterset.errors.items()},
        )
    return filterset.qs


def get_statistics() -> dict:
    """Counts by status and type plus tag totals."""
    totals = Supplier.objects.aggregate(
        total=Count("id"),
        blacklisted=Count("id", filter=Q(is_blacklisted=True)),
        recommended=Count("id", filter=Q(is_recommended=True)),
    )
    by_status = dict.fromkeys(Supplier.Status.values, 0)
    for row in Supplier.objects.values("status").annotate(n=Count("id")):
        by_status[row["status"]] = row["n"]
    by_type = dict.fromkeys(Supplier.SupplierType.values, 0)
    for row in Supplier.objects.values("supplier_type").annotate(
        n=Count("id")
    ):
        by_type[row["supplier_type"]] = row["n"]

    return {**totals, "by_status": by_status, "by_type": by_type}


def get_supplier_detail(*, supplier_id) -> Supplier:
    try:
        return Supplier.objects.prefetch_related(
            "contacts",
            "qualifications",
            "products",
            "department_links__department",
        ).get(pk=supplier_id)
    except Supplier.DoesNotExist:
        raise NotFound(f"Supplier '{supplier_id}' does not exist.")


def get_audit_trail(*, supplier_id):
    """All audit records of a supplier, oldest first; kept after delete."""
    return audit_services.get_trail(
        target_table=TARGET_TABLE, target_id=supplier_id
    )
