"""
Views for the user API.
"""

import logging

from rest_framework import generics, permissions
from rest_framework.authtoken.models import Token
from rest_framework.authtoken.views import ObtainAuthToken
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import APIView

from core.exceptions import Forbidden
from users import identity, services
from users.serializers import UserSerializer, AuthTokenSerializer

logger = logging.getLogger(__name__)


class CreateUserView(generics.CreateAPIView):
    """Register a new principal; it starts with no terminal role."""

    serializer_class = UserSerializer
    authentication_classes = []
    permission_classes = [permissions.AllowAny]


class CreateTokenView(ObtainAuthToken):
    """Create a new auth token for user; blacklisted suppliers are refused."""

    serializer_class = AuthTokenSerializer
    renderer_classes = api_settings.DEFAULT_RENDERER_CLASSES

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(
            data=request.data, context={"request": request}
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]

        if services.is_login_blocked(user):
            logger.warning("Refused token for blacklisted user %s", user.id)
            raise Forbidden("This supplier account has been blacklisted.")

        token, _ = Token.objects.get_or_create(user=user)
        return Response({"token": token.key})


class MeView(APIView):
    """Return the caller's identity context."""

    def get(self, request):
        context = identity.resolve(request.user.id)
        data = context.as_dict()
        data["email"] = request.user.email
        data["full_name"] = request.user.full_name
        return Response(data)
