"""
Tests for the Django admin interface of the notifications app.
"""

from django.test import TestCase, Client
from django.contrib.auth import get_user_model
from django.urls import reverse

from notifications import services
from notifications.models import Notification
from suppliers.models import Supplier

User = get_user_model()


class NotificationAdminTests(TestCase):

    def setUp(self):
        self.client = Client()
        self.admin_user = User.objects.create_superuser(
            email="admin@example.com",
            password="adminpw123",
        )
        self.client.force_login(self.admin_user)

        owner = User.objects.create_user(
            email="owner@example.com", password="pass12345"
        )
        self.supplier = Supplier.objects.create(
            user=owner,
            supplier_type=Supplier.SupplierType.ENTERPRISE,
            company_name="Acme Ltd",
        )
        self.approved = services.notify_supplier_owner(
            supplier=self.supplier,
            event_type=Notification.EventType.SUPPLIER_APPROVED,
            triggered_by=self.admin_user,
        )
        self.url = reverse("admin:notifications_notification_changelist")

    def test_changelist_shows_queued_supplier_event(self):
        """Test a queued approval is listed with its recipient."""
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "owner@example.com</td>")
        self.assertContains(response, "Supplier Approved</td>")
        self.assertContains(response, "Queued</td>")

    def test_changelist_filter_by_event_type(self):
        services.notify_supplier_owner(
            supplier=self.supplier,
            event_type=Notification.EventType.SUPPLIER_SUSPENDED,
        )

        response = self.client.get(
            self.url, {"event_type__exact": "SUPPLIER_SUSPENDED"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Supplier Suspended</td>")
        self.assertNotContains(response, "Supplier Approved</td>")

    def test_search_by_recipient_email(self):
        response = self.client.get(self.url, {"q": "nobody@example.com"})

        self.assertEqual(response.status_code, 200)
        self.assertNotContains(response, "owner@example.com</td>")

    def test_change_page_loads(self):
        url = reverse(
            "admin:notifications_notification_change", args=[self.approved.id]
        )
        response = self.client.get(url)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "SUPPLIER_APPROVED")
