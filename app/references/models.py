"""
Reference/central taxonomy tables to support core business apps.
Prevents circular dependencies.
"""

from django.db import models


class Terminal(models.TextChoices):
    """Top-level application areas a principal may be allowed to enter."""

    SUPPLIER = "supplier", "Supplier"
    DEPARTMENT = "department", "Department"
    ADMIN = "admin", "Admin"


class Department(models.Model):
    """Organizational unit of department staff; self-referencing parent
    supports nested hierarchies."""

    name = models.CharField(max_length=255)
    code = models.CharField(max_length=50, unique=True, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    parent = models.ForeignKey(
        "self", on_delete=models.SET_NULL, null=True, blank=True
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name
