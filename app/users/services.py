"""
Application layer - terminal roles, department affiliation and login
checks for principals.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from core.exceptions import NotFound, ValidationError
from references.models import Department, Terminal
from .models import UserTerminalRole, UserDepartment

logger = logging.getLogger(__name__)


def grant_terminal_role(*, user_id, terminal: str) -> bool:
    """Gives the principal entry to a terminal. Returns True if added."""
    _, created = UserTerminalRole.objects.get_or_create(
        user_id=user_id, role=terminal
    )
    if created:
        logger.info("Granted terminal '%s' to user %s", terminal, user_id)
    return created


def revoke_terminal_role(*, user_id, terminal: str) -> bool:
    """Removes a terminal from the principal. Returns True if removed."""
    deleted, _ = UserTerminalRole.objects.filter(
        user_id=user_id, role=terminal
    ).delete()
    if deleted:
        logger.info("Revoked terminal '%s' from user %s", terminal, user_id)
    return bool(deleted)


def is_login_blocked(user) -> bool:
    """A principal whose supplier is blacklisted may not obtain a token."""
    from suppliers.models import Supplier

    return Supplier.objects.filter(user=user, is_blacklisted=True).exists()


@transaction.atomic
def update_user_terminals(*, user_id, terminals) -> list:
    """
    Replaces the principal's terminal roles (delete-then-insert).
    An empty list returns the principal to pending onboarding.
    """
    user = _lock_user(user_id)

    wanted = list(dict.fromkeys(terminals or []))
    unknown = [t for t in wanted if t not in Terminal.values]
    if unknown:
        raise ValidationError(
            "Invalid terminal roles.", fields={"terminals": unknown}
        )

    UserTerminalRole.objects.filter(user=user).delete()
    UserTerminalRole.objects.bulk_create(
        [UserTerminalRole(user=user, role=terminal) for terminal in wanted]
    )
    logger.info("Set terminals %s for user %s", wanted, user.pk)
    return wanted


@transaction.atomic
def update_user_department(*, user_id, department_id, is_manager=False):
    """
    Sets the principal's single department affiliation, replacing any
    previous one. A null department removes the affiliation.
    """
    user = _lock_user(user_id)

    department = None
    if department_id is not None:
        try:
            department = Department.objects.get(pk=department_id)
        except Department.DoesNotExist:
            raise NotFound(f"Department '{department_id}' does not exist.")

    UserDepartment.objects.filter(user=user).delete()
    if department is None:
        logger.info("Cleared department of user %s", user.pk)
        return None

    affiliation = UserDepartment.objects.create(
        user=user, department=department, is_manager=bool(is_manager)
    )
    logger.info(
        "Affiliated user %s with department %s (manager: %s)",
        user.pk,
        department.pk,
        affiliation.is_manager,
    )
    return affiliation


def _lock_user(user_id):
    try:
        return get_user_model().objects.select_for_update().get(pk=user_id)
    except get_user_model().DoesNotExist:
        raise NotFound(f"Principal '{user_id}' does not exist.")
