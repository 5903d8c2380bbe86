"""
Domain layer - pure, Django-unaware, a data-driven state machine.
Validates supplier lifecycle transitions.
"""

from core.exceptions import InvalidTransitionError

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"
SUSPENDED = "suspended"

STATUSES = (PENDING, APPROVED, REJECTED, SUSPENDED)

# Sentinel target: the entity is removed
DELETED = None

# { event: { from_status: to_status } }
TRANSITIONS = {
    "approve": {PENDING: APPROVED},
    "reject": {PENDING: REJECTED},
    "suspend": {APPROVED: SUSPENDED},
    "restore": {REJECTED: APPROVED, SUSPENDED: APPROVED},
    "delete": {status: DELETED for status in STATUSES},
}


def validate_transition(
    *, from_status: str, event: str, transitions: dict = TRANSITIONS
):
    """
    Returns the target status of `event` applied in `from_status`.
    Raises InvalidTransitionError if the pair is not in the table.
    """
    if event not in transitions:
        raise InvalidTransitionError(f"Event '{event}' is not defined.")

    allowed = transitions[event]
    if from_status not in allowed:
        raise InvalidTransitionError(
            f"Cannot {event} a supplier in status '{from_status}'."
        )
    return allowed[from_status]
