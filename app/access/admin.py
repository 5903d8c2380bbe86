"""
Django admin for menus and backend roles.
"""

from django.contrib import admin

from .models import MenuItem, BackendRole, MenuGrant, UserBackendRole


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("key", "name", "terminal", "parent_key", "sort_order")
    list_filter = ("terminal", "is_active")
    search_fields = ("key", "name", "path")


class MenuGrantInline(admin.TabularInline):
    model = MenuGrant
    extra = 0
    autocomplete_fields = ("menu",)


class UserBackendRoleInline(admin.TabularInline):
    model = UserBackendRole
    extra = 0
    autocomplete_fields = ("user",)


@admin.register(BackendRole)
class BackendRoleAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "terminal", "is_active")
    list_filter = ("terminal", "is_active")
    search_fields = ("code", "name")
    inlines = [MenuGrantInline, UserBackendRoleInline]
