"""
Django command to install the default menu items of every terminal.
Idempotent and safe to re-run.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from access.models import MenuItem


# (key, name, path, icon, terminal, sort_order)
DEFAULT_MENUS = [
    ("supplier_dashboard", "Dashboard", "/dashboard", "layout-dashboard", "supplier", 0),
    ("supplier_info", "Company Info", "/supplier/info", "building", "supplier", 10),
    ("supplier_products", "Products", "/supplier/products", "package", "supplier", 20),
    ("supplier_qualifications", "Qualifications", "/supplier/qualifications", "file-check", "supplier", 30),
    ("supplier_reports", "Reports", "/supplier/reports", "file-text", "supplier", 40),
    ("supplier_complaints", "Complaints", "/supplier/complaints", "message-square", "supplier", 50),
    ("dept_dashboard", "Dashboard", "/dashboard", "layout-dashboard", "department", 0),
    ("dept_suppliers", "Supplier Library", "/dept/suppliers", "folder-open", "department", 10),
    ("dept_products", "Product Search", "/dept/products", "search", "department", 20),
    ("admin_dashboard", "Dashboard", "/admin/dashboard", "bar-chart", "admin", 0),
    ("admin_users", "Users", "/admin/users", "users", "admin", 10),
    ("admin_audit", "Supplier Review", "/admin/audit", "check-circle", "admin", 20),
    ("admin_suppliers", "Suppliers", "/admin/suppliers", "building", "admin", 30),
    ("admin_products", "Products", "/admin/products", "package", "admin", 40),
    ("admin_reports", "Reports", "/admin/reports", "file-text", "admin", 50),
    ("admin_announcements", "Announcements", "/admin/announcements", "bell", "admin", 60),
    ("admin_roles", "Roles", "/admin/roles", "shield", "admin", 70),
    ("admin_settings", "Settings", "/admin/settings", "settings", "admin", 80),
]


class Command(BaseCommand):
    help = "Seed default menu items for the supplier, department and admin terminals."

    @transaction.atomic
    def handle(self, *args, **options):
        created_count = 0
        updated_count = 0
        for key, name, path, icon, terminal, sort_order in DEFAULT_MENUS:
            _, created = MenuItem.objects.update_or_create(
                key=key,
                defaults={
                    "name": name,
                    "path": path,
                    "icon": icon,
                    "terminal": terminal,
                    "sort_order": sort_order,
                    "is_active": True,
                },
            )
            if created:
                created_count += 1
            else:
                updated_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded menus; created: {created_count}, updated: {updated_count}."
            )
        )
