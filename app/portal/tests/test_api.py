"""
Tests for the portal action-dispatch API.
"""

from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from rest_framework import status
from rest_framework.test import APIClient

from access.models import MenuItem, BackendRole
from audit.models import AuditRecord
from references.models import Department, Terminal
from suppliers.models import Supplier, DepartmentSupplierLink
from users import identity
from users.models import UserTerminalRole, UserDepartment

DISPATCH_URL = reverse("portal:dispatch")


def create_user(email, *terminals):
    """Create and return a user holding the given terminals."""
    user = get_user_model().objects.create_user(
        email=email, password="pass12345"
    )
    for terminal in terminals:
        UserTerminalRole.objects.create(user=user, role=terminal)
    return user


def create_supplier(**params):
    """Create and return a sample supplier (helper function)."""
    owner = get_user_model().objects.create_user(
        email=params.pop("email", "owner@example.com"), password="pass12345"
    )
    defaults = {
        "supplier_type": Supplier.SupplierType.ENTERPRISE,
        "company_name": "Acme Ltd",
    }
    defaults.update(params)
    return Supplier.objects.create(user=owner, **defaults)


def call(client, action, **params):
    return client.post(
        DISPATCH_URL, {"action": action, "params": params}, format="json"
    )


class PublicPortalApiTests(TestCase):
    """Test unauthenticated API requests."""

    def setUp(self):
        self.client = APIClient()

    def test_auth_required(self):
        res = call(self.client, "get_user_menus", terminal="department")

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data["code"], "unauthenticated")


class AdminPortalApiTests(TestCase):
    """Test admin-gated lifecycle, tag and role actions."""

    def setUp(self):
        self.admin = create_user("admin@example.com", Terminal.ADMIN)
        self.client = APIClient()
        self.client.force_authenticate(user=self.admin)
        self.supplier = create_supplier()

    def test_unknown_action(self):
        res = call(self.client, "launch_rockets")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["code"], "validation_error")

    def test_missing_params_is_validation_error(self):
        res = call(self.client, "reject", supplier_id=self.supplier.id)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("reason", res.data["fields"])

    def test_approve(self):
        res = call(self.client, "approve", supplier_id=self.supplier.id)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"success": True})
        self.supplier.refresh_from_db()
        self.assertEqual(self.supplier.status, Supplier.Status.APPROVED)

    def test_invalid_transition_returns_409(self):
        res = call(
            self.client, "suspend", supplier_id=self.supplier.id, reason="x"
        )

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data["code"], "invalid_transition")
        self.assertIn("error", res.data)

    def test_suspend_without_reason_uses_default(self):
        call(self.client, "approve", supplier_id=self.supplier.id)

        res = call(self.client, "suspend", supplier_id=self.supplier.id)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.supplier.refresh_from_db()
        self.assertEqual(self.supplier.status, Supplier.Status.SUSPENDED)
        self.assertEqual(self.supplier.rejection_reason, "account suspended")

    def test_onboard_department_principal(self):
        staff = create_user("staff@example.com")
        dept = Department.objects.create(name="Procurement")

        res = call(
            self.client,
            "update_user_terminals",
            user_id=staff.id,
            terminals=["department"],
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["terminals"], ["department"])

        res = call(
            self.client,
            "update_user_department",
            user_id=staff.id,
            department_id=dept.id,
            is_manager=True,
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        context = identity.resolve(staff.id)
        self.assertEqual(context.terminal_roles, {Terminal.DEPARTMENT})
        self.assertEqual(context.department_id, dept.id)
        self.assertTrue(context.is_manager)

    def test_update_user_terminals_rejects_unknown_terminal(self):
        staff = create_user("staff@example.com")

        res = call(
            self.client,
            "update_user_terminals",
            user_id=staff.id,
            terminals=["warehouse"],
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["code"], "validation_error")

    def test_unknown_supplier_returns_404(self):
        res = call(self.client, "approve", supplier_id=987654)

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["code"], "not_found")

    def test_reject_restore_and_audit_trail(self):
        call(
            self.client,
            "reject",
            supplier_id=self.supplier.id,
            reason="missing license",
        )
        call(self.client, "restore", supplier_id=self.supplier.id)

        res = call(self.client, "get_audit_trail", supplier_id=self.supplier.id)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [r["action"] for r in res.data["records"]], ["reject", "restore"]
        )
        self.assertEqual(res.data["records"][0]["reason"], "missing license")
        self.assertEqual(res.data["records"][0]["actor"], "admin@example.com")

    def test_blacklist_keeps_status(self):
        self.supplier.status = Supplier.Status.APPROVED
        self.supplier.save()

        res = call(
            self.client, "blacklist", supplier_id=self.supplier.id, reason="fraud"
        )
        call(
            self.client, "blacklist", supplier_id=self.supplier.id, reason="fraud"
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.supplier.refresh_from_db()
        self.assertTrue(self.supplier.is_blacklisted)
        self.assertEqual(self.supplier.status, Supplier.Status.APPROVED)
        self.assertEqual(
            AuditRecord.objects.filter(action="set_blacklisted").count(), 1
        )

    def test_delete(self):
        supplier_id = self.supplier.id

        res = call(self.client, "delete", supplier_id=supplier_id)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertFalse(Supplier.objects.filter(pk=supplier_id).exists())

    def test_role_crud_and_assignment(self):
        MenuItem.objects.create(
            key="dept_suppliers",
            name="Suppliers",
            path="/dept/suppliers",
            terminal=Terminal.DEPARTMENT,
        )
        buyer = create_user("buyer@example.com", Terminal.DEPARTMENT)

        res = call(
            self.client,
            "create_role",
            name="Buyer",
            code="buyer",
            menu_keys=["dept_suppliers"],
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        role_id = res.data["id"]

        res = call(
            self.client, "assign_user_roles", user_id=buyer.id, role_ids=[role_id]
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        res = call(
            self.client,
            "update_role",
            role_id=role_id,
            name="Senior Buyer",
            code="buyer",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        role = BackendRole.objects.get(pk=role_id)
        self.assertEqual(role.name, "Senior Buyer")
        self.assertEqual(role.grants.count(), 1)

        res = call(self.client, "get_roles_data", terminal="department")
        self.assertEqual(res.data["users"][0]["backend_roles"], [role_id])

        res = call(self.client, "delete_role", role_id=role_id)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertFalse(BackendRole.objects.exists())

    def test_create_role_with_empty_code(self):
        res = call(self.client, "create_role", name="Buyer", code=" ")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_and_statistics(self):
        create_supplier(
            email="b@example.com", company_name="Beta", is_recommended=True
        )

        res = call(self.client, "list_suppliers", library="premium")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["total"], 1)
        self.assertEqual(res.data["suppliers"][0]["company_name"], "Beta")

        res = call(self.client, "list_suppliers", page_size=1, page=2)
        self.assertEqual(res.data["total"], 2)
        self.assertEqual(len(res.data["suppliers"]), 1)

        res = call(self.client, "get_statistics")
        self.assertEqual(res.data["total"], 2)
        self.assertEqual(res.data["recommended"], 1)

    def test_supplier_detail(self):
        res = call(
            self.client, "get_supplier_detail", supplier_id=self.supplier.id
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["supplier"]["company_name"], "Acme Ltd")
        self.assertEqual(res.data["supplier"]["contacts"], [])

    def test_unexpected_error_returns_500(self):
        with mock.patch(
            "suppliers.services.approve_supplier",
            side_effect=RuntimeError("boom"),
        ):
            res = call(self.client, "approve", supplier_id=self.supplier.id)

        self.assertEqual(
            res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        self.assertEqual(res.data["code"], "internal_error")


class NonAdminPortalApiTests(TestCase):
    """Test the gate for principals without the admin terminal."""

    def setUp(self):
        self.user = create_user("dept@example.com", Terminal.DEPARTMENT)
        self.dept = Department.objects.create(name="Procurement")
        UserDepartment.objects.create(user=self.user, department=self.dept)
        self.client = APIClient()
        self.client.force_authenticate(user=self.user)
        for order, key in enumerate(["dept_dashboard", "dept_suppliers"]):
            MenuItem.objects.create(
                key=key,
                name=key,
                path=f"/{key}",
                terminal=Terminal.DEPARTMENT,
                sort_order=order,
            )

    def test_lifecycle_action_forbidden(self):
        supplier = create_supplier()

        res = call(self.client, "approve", supplier_id=supplier.id)

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(res.data["code"], "forbidden")
        supplier.refresh_from_db()
        self.assertEqual(supplier.status, Supplier.Status.PENDING)

    def test_get_user_menus_not_gated(self):
        res = call(self.client, "get_user_menus", terminal="department")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [m["key"] for m in res.data["menus"]],
            ["dept_dashboard", "dept_suppliers"],
        )

    def test_get_user_menus_for_terminal_not_held(self):
        res = call(self.client, "get_user_menus", terminal="admin")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["menus"], [])

    def test_enable_supplier(self):
        supplier = create_supplier(status=Supplier.Status.APPROVED)

        res = call(
            self.client,
            "enable_supplier",
            supplier_id=supplier.id,
            reason="good prices",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        link = DepartmentSupplierLink.objects.get()
        self.assertEqual(link.department, self.dept)
        self.assertEqual(link.created_by, self.user)

    def test_enable_supplier_requires_capability(self):
        role = BackendRole.objects.create(code="viewer", name="Viewer")
        role.grants.create(menu=MenuItem.objects.get(key="dept_dashboard"))
        self.user.backend_role_links.create(role=role)
        supplier = create_supplier(status=Supplier.Status.APPROVED)

        res = call(self.client, "enable_supplier", supplier_id=supplier.id)

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(DepartmentSupplierLink.objects.exists())
