"""
Closed set of portal actions. One frozen command class per action; each
declares the terminal and optional menu capability its caller must hold.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from references.models import Terminal

ADMIN = Terminal.ADMIN.value
DEPARTMENT = Terminal.DEPARTMENT.value


@dataclass(frozen=True)
class Command:
    action: ClassVar[str]
    # None: any authenticated principal
    required_terminal: ClassVar[Optional[str]] = ADMIN
    required_capability: ClassVar[Optional[str]] = None


# --- Menus ---


@dataclass(frozen=True)
class GetUserMenus(Command):
    action = "get_user_menus"
    required_terminal = None

    terminal: str


# --- Supplier lifecycle ---


@dataclass(frozen=True)
class Approve(Command):
    action = "approve"

    supplier_id: int


@dataclass(frozen=True)
class Reject(Command):
    action = "reject"

    supplier_id: int
    reason: str


@dataclass(frozen=True)
class Suspend(Command):
    action = "suspend"

    supplier_id: int
    reason: Optional[str] = None


@dataclass(frozen=True)
class Restore(Command):
    action = "restore"

    supplier_id: int


@dataclass(frozen=True)
class Delete(Command):
    action = "delete"

    supplier_id: int


# --- Reputation tags ---


@dataclass(frozen=True)
class Blacklist(Command):
    action = "blacklist"

    supplier_id: int
    reason: str


@dataclass(frozen=True)
class Unblacklist(Command):
    action = "unblacklist"

    supplier_id: int


@dataclass(frozen=True)
class Recommend(Command):
    action = "recommend"

    supplier_id: int
    reason: Optional[str] = None


@dataclass(frozen=True)
class Unrecommend(Command):
    action = "unrecommend"

    supplier_id: int


@dataclass(frozen=True)
class AddObjection(Command):
    action = "add_objection"

    supplier_id: int
    reason: str


@dataclass(frozen=True)
class RemoveObjection(Command):
    action = "remove_objection"

    supplier_id: int


# --- Backend roles ---


@dataclass(frozen=True)
class CreateRole(Command):
    action = "create_role"

    name: str
    code: str
    terminal: str = DEPARTMENT
    description: Optional[str] = None
    is_active: bool = True
    menu_keys: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class UpdateRole(Command):
    action = "update_role"

    role_id: int
    name: str
    code: str
    terminal: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    menu_keys: Optional[tuple] = None


@dataclass(frozen=True)
class DeleteRole(Command):
    action = "delete_role"

    role_id: int


@dataclass(frozen=True)
class AssignUserRoles(Command):
    action = "assign_user_roles"

    user_id: int
    role_ids: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class UpdateUserTerminals(Command):
    action = "update_user_terminals"

    user_id: int
    terminals: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class UpdateUserDepartment(Command):
    action = "update_user_department"

    user_id: int
    department_id: Optional[int] = None
    is_manager: bool = False


@dataclass(frozen=True)
class GetRolesData(Command):
    action = "get_roles_data"

    terminal: str = DEPARTMENT


# --- Supplier read models ---


@dataclass(frozen=True)
class ListSuppliers(Command):
    action = "list_suppliers"

    status: Optional[str] = None
    supplier_type: Optional[str] = None
    search: Optional[str] = None
    library: str = "all"
    page: int = 1
    page_size: int = 20


@dataclass(frozen=True)
class GetStatistics(Command):
    action = "get_statistics"


@dataclass(frozen=True)
class GetSupplierDetail(Command):
    action = "get_supplier_detail"

    supplier_id: int


@dataclass(frozen=True)
class GetAuditTrail(Command):
    action = "get_audit_trail"

    supplier_id: int


# --- Department library ---


@dataclass(frozen=True)
class EnableSupplier(Command):
    action = "enable_supplier"
    required_terminal = DEPARTMENT
    required_capability = "dept_suppliers"

    supplier_id: int
    library_type: Optional[str] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class DisableSupplier(Command):
    action = "disable_supplier"
    required_terminal = DEPARTMENT
    required_capability = "dept_suppliers"

    supplier_id: int


COMMANDS = {
    cls.action: cls
    for cls in (
        GetUserMenus,
        Approve,
        Reject,
        Suspend,
        Restore,
        Delete,
        Blacklist,
        Unblacklist,
        Recommend,
        Unrecommend,
        AddObjection,
        RemoveObjection,
        CreateRole,
        UpdateRole,
        DeleteRole,
        AssignUserRoles,
        UpdateUserTerminals,
        UpdateUserDepartment,
        GetRolesData,
        ListSuppliers,
        GetStatistics,
        GetSupplierDetail,
        GetAuditTrail,
        EnableSupplier,
        DisableSupplier,
    )
}
