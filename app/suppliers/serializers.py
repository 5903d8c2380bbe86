"""
Serializers for suppliers.
"""

from rest_framework import serializers

from references.serializers import DepartmentSerializer
from suppliers.models import (
    Supplier,
    SupplierContact,
    SupplierQualification,
    SupplierProduct,
    DepartmentSupplierLink,
)


class SupplierListSerializer(serializers.ModelSerializer):
    """Serializer for the supplier LIST view (lightweight)."""

    class Meta:
        model = Supplier
        fields = [
            "id",
            "company_name",
            "supplier_type",
            "status",
            "contact_name",
            "contact_phone",
            "contact_email",
            "is_recommended",
            "is_blacklisted",
            "has_objection",
            "created_at",
        ]
        read_only_fields = fields


class SupplierContactSerializer(serializers.ModelSerializer):

    class Meta:
        model = SupplierContact
        fields = ["id", "name", "position", "phone", "email", "is_primary"]


class SupplierQualificationSerializer(serializers.ModelSerializer):

    class Meta:
        model = SupplierQualification
        fields = [
            "id",
            "name",
            "certificate_number",
            "issuing_authority",
            "issue_date",
            "expire_date",
        ]


class SupplierProductSerializer(serializers.ModelSerializer):

    class Meta:
        model = SupplierProduct
        fields = ["id", "name", "code", "unit", "price", "is_active"]


class DepartmentSupplierLinkSerializer(serializers.ModelSerializer):
    """A department library entry of a supplier."""

    department = DepartmentSerializer(read_only=True)

    class Meta:
        model = DepartmentSupplierLink
        fields = ["id", "department", "library_type", "reason", "created_at"]


class SupplierDetailSerializer(SupplierListSerializer):
    """Serializer for the supplier DETAIL view (comprehensive, RO)."""

    contacts = SupplierContactSerializer(many=True, read_only=True)
    qualifications = SupplierQualificationSerializer(
        many=True, read_only=True
    )
    products = SupplierProductSerializer(many=True, read_only=True)
    department_links = DepartmentSupplierLinkSerializer(
        many=True, read_only=True
    )

    class Meta(SupplierListSerializer.Meta):

        fields = SupplierListSerializer.Meta.fields + [
            "unified_social_credit_code",
            "registration_number",
            "legal_representative",
            "country",
            "province",
            "city",
            "address",
            "business_scope",
            "main_products",
            "registered_capital",
            "employee_count",
            "establishment_date",
            "rejection_reason",
            "approved_at",
            "approved_by",
            "recommend_reason",
            "recommended_at",
            "blacklist_reason",
            "blacklisted_at",
            "objection_reason",
            "objection_at",
            "contacts",
            "qualifications",
            "products",
            "department_links",
        ]
        read_only_fields = fields
