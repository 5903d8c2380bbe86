"""
Error taxonomy shared by all apps.
Pure Python, Django-unaware, so domain layers can raise these directly.
"""


class PortalError(Exception):
    """Base class for errors surfaced to the caller as {error, code}."""

    code = "error"
    status_code = 400
    default_message = "Request failed."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(PortalError):
    """No valid principal on the request."""

    code = "unauthenticated"
    status_code = 401
    default_message = "Authentication credentials were not provided."


class Forbidden(PortalError):
    """Principal is authenticated but lacks the terminal or capability."""

    code = "forbidden"
    status_code = 403
    default_message = "You do not have permission to perform this action."


class NotFound(PortalError):
    """Referenced principal, supplier, role or menu does not exist."""

    code = "not_found"
    status_code = 404
    default_message = "Not found."


class InvalidTransitionError(PortalError):
    """Lifecycle or tag operation is not legal from the current state."""

    code = "invalid_transition"
    status_code = 409
    default_message = "Transition is not allowed."


class ValidationError(PortalError):
    """Missing or malformed input (reason text, role code, etc.)."""

    code = "validation_error"
    status_code = 400
    default_message = "Invalid input."

    def __init__(self, message=None, fields=None):
        super().__init__(message)
        self.fields = fields or {}
