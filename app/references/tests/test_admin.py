"""
Tests for the Django admin interface of the references app.
"""

from django.test import TestCase, Client
from django.contrib.auth import get_user_model
from django.urls import reverse

from references.models import Department


class ReferenceAdminTests(TestCase):

    def setUp(self):
        """Create a logged-in superuser client."""
        self.client = Client()
        admin_user = get_user_model().objects.create_superuser(
            email="admin@example.com",
            password="test_pass123",
        )
        self.client.force_login(admin_user)

    def test_department_changelist_loads(self):
        """Test that the department changelist loads correctly."""
        url = reverse("admin:references_department_changelist")
        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)

    def test_department_add_page_loads(self):
        """Test that the department add page loads correctly."""
        url = reverse("admin:references_department_add")
        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)

    def test_department_change_page_loads(self):
        """Test that the change page for a department loads correctly."""
        dept = Department.objects.create(name="Test Dept")
        url = reverse("admin:references_department_change", args=[dept.id])
        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)
