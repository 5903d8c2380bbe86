"""
Filters for the supplier listing.
"""

from django.db.models import Q
from django_filters import rest_framework as filters

from .models import Supplier


class SupplierFilter(filters.FilterSet):
    """FilterSet for the Supplier model."""

    LIBRARY_CHOICES = (
        ("all", "All"),
        ("premium", "Premium"),
        ("blacklist", "Blacklist"),
    )

    status = filters.ChoiceFilter(choices=Supplier.Status.choices)
    supplier_type = filters.ChoiceFilter(
        choices=Supplier.SupplierType.choices
    )
    search = filters.CharFilter(
        method="filter_search",
        help_text="Company, contact, credit code, email or phone.",
    )
    library = filters.ChoiceFilter(
        choices=LIBRARY_CHOICES, method="filter_library"
    )

    class Meta:
        model = Supplier
        fields = ["status", "supplier_type"]

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(company_name__icontains=value)
            | Q(contact_name__icontains=value)
            | Q(unified_social_credit_code__icontains=value)
            | Q(contact_email__icontains=value)
            | Q(contact_phone__icontains=value)
        )

    def filter_library(self, queryset, name, value):
        if value == "premium":
            return queryset.filter(is_recommended=True)
        if value == "blacklist":
            # Disputed suppliers are listed with the blacklisted ones
            return queryset.filter(Q(is_blacklisted=True) | Q(has_objection=True))
        return queryset
