"""
Data models for menu visibility: menu items, backend roles and grants.
"""

from django.conf import settings
from django.db import models

from core.models import TimestampedModel
from references.models import Terminal


class MenuItem(models.Model):
    """A navigable entry of one terminal; one level of nesting."""

    key = models.CharField(max_length=100, unique=True)
    name = models.CharField(max_length=100)
    path = models.CharField(max_length=255)
    icon = models.CharField(max_length=50, blank=True, null=True)
    terminal = models.CharField(max_length=20, choices=Terminal.choices)
    parent_key = models.CharField(max_length=100, blank=True, null=True)
    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["terminal", "sort_order", "key"]

    def __str__(self):
        return f"{self.terminal}:{self.key}"


class BackendRole(TimestampedModel):
    """Admin-defined role restricting menu visibility in one terminal."""

    code = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, null=True)
    terminal = models.CharField(
        max_length=20,
        choices=Terminal.choices,
        default=Terminal.DEPARTMENT,
    )
    is_active = models.BooleanField(default=True)
    menus = models.ManyToManyField(
        MenuItem, through="MenuGrant", related_name="roles", blank=True
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class MenuGrant(models.Model):
    """Existence means: this role may see this menu item."""

    role = models.ForeignKey(
        BackendRole, on_delete=models.CASCADE, related_name="grants"
    )
    menu = models.ForeignKey(
        MenuItem, on_delete=models.CASCADE, related_name="grants"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = (("role", "menu"),)

    def __str__(self):
        return f"{self.role.code} -> {self.menu.key}"


class UserBackendRole(models.Model):
    """Many-to-many assignment of backend roles to principals."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="backend_role_links",
    )
    role = models.ForeignKey(
        BackendRole, on_delete=models.CASCADE, related_name="assignments"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = (("user", "role"),)

    def __str__(self):
        return f"{self.user} [{self.role.code}]"
