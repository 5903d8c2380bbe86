"""
Access gate: checks terminal membership and, optionally, a menu-keyed
capability before any portal action runs.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from core.exceptions import Forbidden
from references.models import Terminal
from users import identity
from users.identity import IdentityContext
from . import services

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allow:
    identity: IdentityContext


@dataclass(frozen=True)
class Deny:
    reason: str


Decision = Union[Allow, Deny]


def authorize(
    principal_id,
    required_terminal: str,
    required_capability: Optional[str] = None,
) -> Decision:
    """
    Allow iff the principal holds `required_terminal` and, when a
    capability is named, that menu key is visible to it in the terminal.
    Admin-terminal principals pass any capability check there.
    """
    context = identity.resolve(principal_id)

    if not context.has_terminal(required_terminal):
        return Deny(f"Terminal '{required_terminal}' is not granted.")

    if required_capability is None or required_terminal == Terminal.ADMIN:
        return Allow(context)

    visible = {m.key for m in services.resolve_menus(context, required_terminal)}
    if required_capability not in visible:
        return Deny(f"Capability '{required_capability}' is not granted.")

    return Allow(context)


def require(
    principal_id,
    required_terminal: str,
    required_capability: Optional[str] = None,
) -> IdentityContext:
    """Like authorize(), but raises Forbidden on Deny."""
    decision = authorize(principal_id, required_terminal, required_capability)
    if isinstance(decision, Deny):
        logger.warning(
            "Denied principal %s on %s/%s: %s",
            principal_id,
            required_terminal,
            required_capability,
            decision.reason,
        )
        raise Forbidden(decision.reason)
    return decision.identity
