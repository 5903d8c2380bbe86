"""
Django admin customization for reference/central taxonomy tables.
"""

from django.contrib import admin

from references import models


@admin.register(models.Department)
class DepartmentAdmin(admin.ModelAdmin):
    # Needed for autocomplete_fields in UserDepartmentInline
    search_fields = ("name", "code")
    list_display = ("name", "code", "is_active")
    list_filter = ("is_active",)
