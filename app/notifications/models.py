"""
Data models for the notifications app.
Unified - used by all apps to queue notifications for principals.
Delivery (email, SMS, in-app push) is handled outside this service.
"""

from django.db import models
from django.conf import settings


# To prevent circular dependencies - No direct import of other apps' models


class Notification(models.Model):
    """A unified, asynchronous notification queue for all entities."""

    class EntityType(models.TextChoices):
        SUPPLIER = "SUPPLIER", "Supplier"

    class EventType(models.TextChoices):
        SUPPLIER_APPROVED = "SUPPLIER_APPROVED", "Supplier Approved"
        SUPPLIER_REJECTED = "SUPPLIER_REJECTED", "Supplier Rejected"
        SUPPLIER_SUSPENDED = "SUPPLIER_SUSPENDED", "Supplier Suspended"
        SUPPLIER_RESTORED = "SUPPLIER_RESTORED", "Supplier Restored"
        SUPPLIER_BLACKLISTED = "SUPPLIER_BLACKLISTED", "Supplier Blacklisted"
        CUSTOM = "CUSTOM", "Custom"

    class Method(models.TextChoices):
        SYSTEM = "SYSTEM", "System (in-app)"
        EMAIL = "EMAIL", "Email"
        SMS = "SMS", "SMS"

    class Status(models.TextChoices):
        QUEUED = "queued", "Queued"
        SENT = "sent", "Sent"
        FAILED = "failed", "Failed"
        CANCELED = "canceled", "Canceled"

    # Polymorphic link to the source entity (e.g., a Supplier)
    entity_type = models.CharField(
        max_length=30,
        choices=EntityType.choices,
    )
    entity_id = models.BigIntegerField()

    # What triggered this?
    event_type = models.CharField(max_length=50, choices=EventType.choices)
    triggered_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,  # User who caused it might be deleted
        null=True,
        blank=True,
        related_name="triggered_notifications",
    )

    # Who is this for?
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    # How?
    method = models.CharField(
        max_length=30, choices=Method.choices, default=Method.SYSTEM
    )
    payload = models.JSONField(blank=True, null=True)  # Extra context

    # State
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.QUEUED
    )
    attempts = models.IntegerField(default=0)
    last_error = models.TextField(blank=True, null=True)
    sent_at = models.DateTimeField(blank=True, null=True)
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.event_type} for {self.entity_type} {self.entity_id}"
