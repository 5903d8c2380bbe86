"""
Django admin customization for suppliers.
"""

from django.contrib import admin

from suppliers import models


class SupplierContactInline(admin.TabularInline):
    model = models.SupplierContact
    extra = 0


class SupplierQualificationInline(admin.TabularInline):
    model = models.SupplierQualification
    extra = 0


class DepartmentSupplierLinkInline(admin.TabularInline):
    model = models.DepartmentSupplierLink
    extra = 0
    autocomplete_fields = ("department", "created_by")


@admin.register(models.Supplier)
class SupplierAdmin(admin.ModelAdmin):
    """Lifecycle fields change only through the supplier services."""

    list_display = (
        "id",
        "company_name",
        "supplier_type",
        "status",
        "is_recommended",
        "is_blacklisted",
        "has_objection",
    )
    list_filter = (
        "status",
        "supplier_type",
        "is_recommended",
        "is_blacklisted",
        "has_objection",
    )
    search_fields = (
        "company_name",
        "contact_name",
        "contact_email",
        "unified_social_credit_code",
    )
    autocomplete_fields = ("user",)
    readonly_fields = (
        "status",
        "rejection_reason",
        "approved_at",
        "approved_by",
        "is_recommended",
        "recommend_reason",
        "recommended_at",
        "is_blacklisted",
        "blacklist_reason",
        "blacklisted_at",
        "has_objection",
        "objection_reason",
        "objection_at",
    )
    inlines = [
        SupplierContactInline,
        SupplierQualificationInline,
        DepartmentSupplierLinkInline,
    ]

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return self.readonly_fields + ("supplier_type",)
        return self.readonly_fields


@admin.register(models.SupplierProduct)
class SupplierProductAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "supplier", "is_active")
    search_fields = ("name", "code")
    list_filter = ("is_active",)
