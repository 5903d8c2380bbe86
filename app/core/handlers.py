"""
DRF exception handler: every error body is {"error": ..., "code": ...}.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions import PortalError

logger = logging.getLogger(__name__)

_DRF_CODES = {
    status.HTTP_401_UNAUTHORIZED: "unauthenticated",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_400_BAD_REQUEST: "validation_error",
}


def error_response(exc: PortalError) -> Response:
    """Build the JSON response for a domain error."""
    body = {"error": exc.message, "code": exc.code}
    fields = getattr(exc, "fields", None)
    if fields:
        body["fields"] = fields
    return Response(body, status=exc.status_code)


def api_exception_handler(exc, context):
    """Reshape domain and DRF errors into the portal error body."""
    if isinstance(exc, PortalError):
        return error_response(exc)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "error": "Invalid input.",
            "code": "validation_error",
            "fields": exc.detail,
        }
        return response

    detail = response.data.get("detail", "") if isinstance(
        response.data, dict
    ) else ""
    response.data = {
        "error": str(detail) or "Request failed.",
        "code": _DRF_CODES.get(response.status_code, "error"),
    }
    return response
