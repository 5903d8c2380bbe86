"""
Tests for the user API.
"""

from django.test import TestCase
from django.contrib.auth import get_user_model
from django.urls import reverse

from rest_framework.test import APIClient
from rest_framework import status

from references.models import Terminal
from suppliers.models import Supplier
from users.models import UserTerminalRole

CREATE_USER_URL = reverse("users:create")
TOKEN_URL = reverse("users:token")
ME_URL = reverse("users:me")


def create_user(**params):
    """Create and return a new user (helper function)."""
    return get_user_model().objects.create_user(**params)


class PublicUserApiTests(TestCase):
    """Test the public features of the user API."""

    def setUp(self):
        self.client = APIClient()

    def test_create_user_success(self):
        """Test creating a user is successful."""
        payload = {
            "email": "test@example.com",
            "password": "testpass123",
            "full_name": "Test name",
        }
        res = self.client.post(CREATE_USER_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        user = get_user_model().objects.get(email=payload["email"])
        self.assertTrue(user.check_password(payload["password"]))
        self.assertNotIn("password", res.data)
        # a fresh registration holds no terminal yet
        self.assertFalse(user.terminal_roles.exists())

    def test_user_with_email_exists_error(self):
        """Test error returned if user with email exists."""
        payload = {
            "email": "test@example.com",
            "password": "testpass123",
            "full_name": "Test User",
        }
        create_user(**payload)
        res = self.client.post(CREATE_USER_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["code"], "validation_error")

    def test_password_too_short(self):
        """Test an error is returned if password is less than 5 chars."""
        payload = {
            "email": "test@example.com",
            "password": "psw",
            "full_name": "Test User",
        }
        res = self.client.post(CREATE_USER_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        user_exists = (
            get_user_model()
            .objects.filter(
                email=payload["email"],
            )
            .exists()
        )
        self.assertFalse(user_exists)

    def test_create_token_for_user(self):
        """Test generates token for valid credentials."""
        create_user(email="test@example.com", password="test-user-pass123")
        payload = {
            "email": "test@example.com",
            "password": "test-user-pass123",
        }
        res = self.client.post(TOKEN_URL, payload)

        self.assertIn("token", res.data)
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_create_token_bad_credentials(self):
        """Test returns error if credentials invalid."""
        create_user(email="test@example.com", password="goodpass")
        payload = {"email": "test@example.com", "password": "badpass"}
        res = self.client.post(TOKEN_URL, payload)

        self.assertNotIn("token", res.data)
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_create_token_refused_for_blacklisted_supplier(self):
        """Test a blacklisted supplier cannot log in."""
        user = create_user(email="sup@example.com", password="supp-pass123")
        Supplier.objects.create(
            user=user,
            supplier_type=Supplier.SupplierType.ENTERPRISE,
            status=Supplier.Status.APPROVED,
            is_blacklisted=True,
            blacklist_reason="fraud",
        )
        payload = {"email": "sup@example.com", "password": "supp-pass123"}
        res = self.client.post(TOKEN_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(res.data["code"], "forbidden")
        self.assertNotIn("token", res.data)

    def test_me_requires_authentication(self):
        """Test authentication is required for the me endpoint."""
        res = self.client.get(ME_URL)

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data["code"], "unauthenticated")


class PrivateUserApiTests(TestCase):
    """Test API requests that require authentication."""

    def setUp(self):
        self.user = create_user(
            email="test@example.com",
            password="testpass123",
            full_name="Test Name",
        )
        self.client = APIClient()
        self.client.force_authenticate(user=self.user)

    def test_me_pending_onboarding(self):
        """Test a user without terminals sees the waiting state."""
        res = self.client.get(ME_URL)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["email"], self.user.email)
        self.assertEqual(res.data["terminal_roles"], [])
        self.assertTrue(res.data["pending_onboarding"])

    def test_me_lists_terminals(self):
        """Test terminals held are returned."""
        UserTerminalRole.objects.create(user=self.user, role=Terminal.ADMIN)

        res = self.client.get(ME_URL)

        self.assertEqual(res.data["terminal_roles"], ["admin"])
        self.assertFalse(res.data["pending_onboarding"])
