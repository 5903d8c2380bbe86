"""
IdentityContext: which terminals a principal may enter and its
department or supplier affiliation. Computed fresh on every call.
"""

from dataclasses import dataclass, field
from typing import Optional

from django.contrib.auth import get_user_model

from core.exceptions import NotFound
from references.models import Terminal
from .models import UserTerminalRole, UserDepartment


@dataclass(frozen=True)
class IdentityContext:
    """Resolved roles and affiliations of one authenticated principal."""

    principal_id: int
    terminal_roles: frozenset = field(default_factory=frozenset)
    department_id: Optional[int] = None
    is_manager: Optional[bool] = None
    supplier_id: Optional[int] = None

    @property
    def is_pending_onboarding(self) -> bool:
        """No terminal role yet: the caller shows a waiting screen."""
        return not self.terminal_roles

    def has_terminal(self, terminal: str) -> bool:
        return terminal in self.terminal_roles

    def as_dict(self) -> dict:
        return {
            "principal_id": self.principal_id,
            "terminal_roles": sorted(self.terminal_roles),
            "department_id": self.department_id,
            "is_manager": self.is_manager,
            "supplier_id": self.supplier_id,
            "pending_onboarding": self.is_pending_onboarding,
        }


def resolve(principal_id) -> IdentityContext:
    """
    Loads terminal roles and, depending on which are present, the single
    department or supplier affiliation.
    Raises NotFound only when the principal itself does not exist.
    """
    # Imported here: suppliers depends on users at the model level.
    from suppliers.models import Supplier

    if not get_user_model().objects.filter(pk=principal_id).exists():
        raise NotFound(f"Principal '{principal_id}' does not exist.")

    roles = frozenset(
        UserTerminalRole.objects.filter(user_id=principal_id).values_list(
            "role", flat=True
        )
    )

    department_id = None
    is_manager = None
    if Terminal.DEPARTMENT in roles:
        affiliation = UserDepartment.objects.filter(
            user_id=principal_id
        ).first()
        if affiliation:
            department_id = affiliation.department_id
            is_manager = affiliation.is_manager

    supplier_id = None
    if Terminal.SUPPLIER in roles:
        supplier_id = (
            Supplier.objects.filter(user_id=principal_id)
            .values_list("id", flat=True)
            .first()
        )

    return IdentityContext(
        principal_id=principal_id,
        terminal_roles=roles,
        department_id=department_id,
        is_manager=is_manager,
        supplier_id=supplier_id,
    )
