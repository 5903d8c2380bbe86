"""
Tests for the Django admin interface of the suppliers app.
"""

from django.test import TestCase, Client
from django.contrib.auth import get_user_model
from django.urls import reverse

from suppliers.models import Supplier


class SupplierAdminTests(TestCase):

    def setUp(self):
        """Create a logged-in superuser client and one supplier."""
        self.client = Client()
        User = get_user_model()
        admin_user = User.objects.create_superuser(
            email="admin@example.com",
            password="test_pass123",
        )
        self.client.force_login(admin_user)
        owner = User.objects.create_user(
            email="owner@example.com", password="test_pass123"
        )
        self.supplier = Supplier.objects.create(
            user=owner,
            supplier_type=Supplier.SupplierType.ENTERPRISE,
            company_name="Acme Ltd",
        )

    def test_supplier_changelist_loads(self):
        url = reverse("admin:suppliers_supplier_changelist")
        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Acme Ltd")

    def test_supplier_change_page_loads(self):
        url = reverse("admin:suppliers_supplier_change", args=[self.supplier.id])
        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)

    def test_supplier_search(self):
        url = reverse("admin:suppliers_supplier_changelist")
        response = self.client.get(url, {"q": "Acme"})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Acme Ltd")
