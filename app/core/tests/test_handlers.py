"""
Tests for the error taxonomy and the API exception handler.
"""

from django.test import SimpleTestCase
from rest_framework import exceptions

from core import exceptions as portal_exceptions
from core.handlers import api_exception_handler


class ApiExceptionHandlerTests(SimpleTestCase):

    def test_portal_errors_map_to_status_and_code(self):
        cases = [
            (portal_exceptions.Unauthenticated(), 401, "unauthenticated"),
            (portal_exceptions.Forbidden(), 403, "forbidden"),
            (portal_exceptions.NotFound("gone"), 404, "not_found"),
            (
                portal_exceptions.InvalidTransitionError(),
                409,
                "invalid_transition",
            ),
            (portal_exceptions.ValidationError(), 400, "validation_error"),
        ]
        for exc, status_code, code in cases:
            with self.subTest(code=code):
                response = api_exception_handler(exc, {})
                self.assertEqual(response.status_code, status_code)
                self.assertEqual(response.data["code"], code)
                self.assertEqual(response.data["error"], exc.message)

    def test_validation_error_fields_included(self):
        exc = portal_exceptions.ValidationError(
            "Invalid role.", fields={"code": "Required."}
        )

        response = api_exception_handler(exc, {})

        self.assertEqual(response.data["fields"], {"code": "Required."})

    def test_drf_validation_error_reshaped(self):
        exc = exceptions.ValidationError({"reason": ["Required."]})

        response = api_exception_handler(exc, {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["code"], "validation_error")
        self.assertIn("reason", response.data["fields"])

    def test_drf_auth_error_reshaped(self):
        response = api_exception_handler(exceptions.NotAuthenticated(), {})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["code"], "unauthenticated")

    def test_unhandled_exception_returns_none(self):
        self.assertIsNone(api_exception_handler(RuntimeError("x"), {}))
