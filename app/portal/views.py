"""
Views for the portal API: the single action-dispatch endpoint.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import APIView

from access import gate
from core.exceptions import PortalError, ValidationError
from users import identity
from . import actions
from .handlers import execute
from .serializers import DispatchSerializer, PARAMETER_SERIALIZERS

logger = logging.getLogger(__name__)


def build_command(action: str, params: dict) -> actions.Command:
    """Validates `params` for `action` and returns the frozen command."""
    command_class = actions.COMMANDS.get(action)
    if command_class is None:
        raise ValidationError(
            f"Unknown action '{action}'.", fields={"action": "Unknown."}
        )

    serializer = PARAMETER_SERIALIZERS[command_class](data=params)
    serializer.is_valid(raise_exception=True)
    values = {
        key: tuple(value) if isinstance(value, list) else value
        for key, value in serializer.validated_data.items()
    }
    return command_class(**values)


class ActionDispatchView(APIView):
    """
    POST {"action": <name>, "params": {...}}.
    Every command passes the access gate for its declared terminal and
    capability before it runs.
    """

    @extend_schema(
        request=DispatchSerializer, responses={200: OpenApiTypes.OBJECT}
    )
    def post(self, request):
        envelope = DispatchSerializer(data=request.data)
        envelope.is_valid(raise_exception=True)
        action = envelope.validated_data["action"]

        try:
            command = build_command(action, envelope.validated_data["params"])

            if command.required_terminal is None:
                context = identity.resolve(request.user.id)
            else:
                context = gate.require(
                    request.user.id,
                    command.required_terminal,
                    command.required_capability,
                )

            result = execute(command, user=request.user, context=context)
        except (PortalError, APIException):
            raise
        except Exception:
            logger.exception(
                "Action '%s' failed for user %s", action, request.user.id
            )
            return Response(
                {"error": "Internal server error.", "code": "internal_error"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        logger.info("User %s ran action '%s'", request.user.id, action)
        return Response(result, status=status.HTTP_200_OK)
