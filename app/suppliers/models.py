"""
Data models for suppliers: the lifecycle-governed account, its
profile children and department library links.
"""

from django.conf import settings
from django.db import models

from core.exceptions import ValidationError
from core.models import TimestampedModel, OwnedModel


class Supplier(TimestampedModel):
    """
    Supplier account. `status` follows the lifecycle state machine;
    the three reputation tags are independent of it.
    """

    class SupplierType(models.TextChoices):
        ENTERPRISE = "enterprise", "Enterprise"
        OVERSEAS = "overseas", "Overseas"
        INDIVIDUAL = "individual", "Individual"

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"
        SUSPENDED = "suspended", "Suspended"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="supplier",
    )
    supplier_type = models.CharField(
        max_length=20, choices=SupplierType.choices
    )
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.PENDING
    )

    # Profile
    company_name = models.CharField(max_length=255, blank=True, null=True)
    unified_social_credit_code = models.CharField(
        max_length=64, blank=True, null=True
    )
    registration_number = models.CharField(
        max_length=64, blank=True, null=True
    )
    legal_representative = models.CharField(
        max_length=100, blank=True, null=True
    )
    id_card_number = models.CharField(max_length=64, blank=True, null=True)
    contact_name = models.CharField(max_length=100, blank=True, null=True)
    contact_phone = models.CharField(max_length=32, blank=True, null=True)
    contact_email = models.EmailField(blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)
    province = models.CharField(max_length=100, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    business_scope = models.TextField(blank=True, null=True)
    main_products = models.TextField(blank=True, null=True)
    registered_capital = models.DecimalField(
        max_digits=18, decimal_places=2, blank=True, null=True
    )
    employee_count = models.IntegerField(blank=True, null=True)
    establishment_date = models.DateField(blank=True, null=True)

    # Lifecycle
    rejection_reason = models.TextField(blank=True, null=True)
    approved_at = models.DateTimeField(blank=True, null=True)
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="approved_suppliers",
    )

    # Reputation tags
    is_recommended = models.BooleanField(default=False)
    recommend_reason = models.TextField(blank=True, null=True)
    recommended_at = models.DateTimeField(blank=True, null=True)
    is_blacklisted = models.BooleanField(default=False)
    blacklist_reason = models.TextField(blank=True, null=True)
    blacklisted_at = models.DateTimeField(blank=True, null=True)
    has_objection = models.BooleanField(default=False)
    objection_reason = models.TextField(blank=True, null=True)
    objection_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="ix_supplier_status"),
        ]

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_supplier_type = instance.__dict__.get("supplier_type")
        return instance

    def save(self, *args, **kwargs):
        loaded = getattr(self, "_loaded_supplier_type", None)
        if loaded is not None and loaded != self.supplier_type:
            raise ValidationError(
                "Supplier type cannot be changed after registration.",
                fields={"supplier_type": "Immutable."},
            )
        super().save(*args, **kwargs)

    def __str__(self):
        return self.company_name or f"Supplier #{self.pk}"


class SupplierContact(models.Model):
    supplier = models.ForeignKey(
        Supplier, on_delete=models.CASCADE, related_name="contacts"
    )
    name = models.CharField(max_length=100)
    position = models.CharField(max_length=100, blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    is_primary = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class SupplierQualification(TimestampedModel):
    """Certificate or licence uploaded by a supplier."""

    supplier = models.ForeignKey(
        Supplier, on_delete=models.CASCADE, related_name="qualifications"
    )
    name = models.CharField(max_length=255)
    certificate_number = models.CharField(
        max_length=100, blank=True, null=True
    )
    issuing_authority = models.CharField(
        max_length=255, blank=True, null=True
    )
    issue_date = models.DateField(blank=True, null=True)
    expire_date = models.DateField(blank=True, null=True)

    def __str__(self):
        return self.name


class SupplierProduct(TimestampedModel):
    supplier = models.ForeignKey(
        Supplier, on_delete=models.CASCADE, related_name="products"
    )
    name = models.CharField(max_length=255)
    code = models.CharField(max_length=100, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    unit = models.CharField(max_length=32, blank=True, null=True)
    price = models.DecimalField(
        max_digits=18, decimal_places=2, blank=True, null=True
    )
    is_active = models.BooleanField(default=True)

    def __str__(self):
        return self.name


class DepartmentSupplierLink(OwnedModel):
    """A department has enabled a supplier into its working library."""

    class LibraryType(models.TextChoices):
        CURRENT = "current", "Current"
        BACKUP = "backup", "Backup"

    department = models.ForeignKey(
        "references.Department",
        on_delete=models.CASCADE,
        related_name="supplier_links",
    )
    supplier = models.ForeignKey(
        Supplier, on_delete=models.CASCADE, related_name="department_links"
    )
    library_type = models.CharField(
        max_length=20,
        choices=LibraryType.choices,
        default=LibraryType.CURRENT,
    )
    reason = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = (("department", "supplier"),)

    def __str__(self):
        return f"{self.department} -> {self.supplier}"
