"""
Execution of portal commands. `execute` is dispatched on the command
type; every command class in `actions.COMMANDS` has one registration.
Handlers run after the access gate and return JSON-ready data.
"""

from functools import singledispatch

from django.core.paginator import Paginator

from access import services as access_services
from access.serializers import MenuItemSerializer
from audit.serializers import AuditRecordSerializer
from suppliers import services as supplier_services
from suppliers.serializers import (
    SupplierListSerializer,
    SupplierDetailSerializer,
)
from users import services as user_services
from . import actions

SUCCESS = {"success": True}


@singledispatch
def execute(command, *, user, context):
    raise NotImplementedError(
        f"No handler registered for {type(command).__name__}."
    )


# --- Menus ---


@execute.register
def _(command: actions.GetUserMenus, *, user, context):
    menus = access_services.get_user_menus(
        user_id=context.principal_id, terminal=command.terminal
    )
    return {"menus": MenuItemSerializer(menus, many=True).data}


# --- Supplier lifecycle ---


@execute.register
def _(command: actions.Approve, *, user, context):
    supplier_services.approve_supplier(
        supplier_id=command.supplier_id, actor=user
    )
    return SUCCESS


@execute.register
def _(command: actions.Reject, *, user, context):
    supplier_services.reject_supplier(
        supplier_id=command.supplier_id, actor=user, reason=command.reason
    )
    return SUCCESS


@execute.register
def _(command: actions.Suspend, *, user, context):
    supplier_services.suspend_supplier(
        supplier_id=command.supplier_id, actor=user, reason=command.reason
    )
    return SUCCESS


@execute.register
def _(command: actions.Restore, *, user, context):
    supplier_services.restore_supplier(
        supplier_id=command.supplier_id, actor=user
    )
    return SUCCESS


@execute.register
def _(command: actions.Delete, *, user, context):
    supplier_services.delete_supplier(
        supplier_id=command.supplier_id, actor=user
    )
    return SUCCESS


# --- Reputation tags ---


@execute.register
def _(command: actions.Blacklist, *, user, context):
    supplier_services.set_blacklisted(
        supplier_id=command.supplier_id, actor=user, reason=command.reason
    )
    return SUCCESS


@execute.register
def _(command: actions.Unblacklist, *, user, context):
    supplier_services.clear_blacklisted(
        supplier_id=command.supplier_id, actor=user
    )
    return SUCCESS


@execute.register
def _(command: actions.Recommend, *, user, context):
    supplier_services.set_recommended(
        supplier_id=command.supplier_id, actor=user, reason=command.reason
    )
    return SUCCESS


@execute.register
def _(command: actions.Unrecommend, *, user, context):
    supplier_services.clear_recommended(
        supplier_id=command.supplier_id, actor=user
    )
    return SUCCESS


@execute.register
def _(command: actions.AddObjection, *, user, context):
    supplier_services.set_objection(
        supplier_id=command.supplier_id, actor=user, reason=command.reason
    )
    return SUCCESS


@execute.register
def _(command: actions.RemoveObjection, *, user, context):
    supplier_services.clear_objection(
        supplier_id=command.supplier_id, actor=user
    )
    return SUCCESS


# --- Backend roles ---


@execute.register
def _(command: actions.CreateRole, *, user, context):
    role = access_services.create_role(
        name=command.name,
        code=command.code,
        terminal=command.terminal,
        description=command.description,
        is_active=command.is_active,
        menu_keys=command.menu_keys,
    )
    return {"success": True, "id": role.pk}


@execute.register
def _(command: actions.UpdateRole, *, user, context):
    access_services.update_role(
        role_id=command.role_id,
        name=command.name,
        code=command.code,
        terminal=command.terminal,
        description=command.description,
        is_active=command.is_active,
        menu_keys=command.menu_keys,
    )
    return SUCCESS


@execute.register
def _(command: actions.DeleteRole, *, user, context):
    access_services.delete_role(role_id=command.role_id)
    return SUCCESS


@execute.register
def _(command: actions.AssignUserRoles, *, user, context):
    access_services.assign_user_roles(
        user_id=command.user_id, role_ids=command.role_ids
    )
    return SUCCESS


@execute.register
def _(command: actions.UpdateUserTerminals, *, user, context):
    terminals = user_services.update_user_terminals(
        user_id=command.user_id, terminals=command.terminals
    )
    return {"success": True, "terminals": terminals}


@execute.register
def _(command: actions.UpdateUserDepartment, *, user, context):
    user_services.update_user_department(
        user_id=command.user_id,
        department_id=command.department_id,
        is_manager=command.is_manager,
    )
    return SUCCESS


@execute.register
def _(command: actions.GetRolesData, *, user, context):
    return access_services.get_roles_data(terminal=command.terminal)


# --- Supplier read models ---


@execute.register
def _(command: actions.ListSuppliers, *, user, context):
    filters = {
        "status": command.status,
        "supplier_type": command.supplier_type,
        "search": command.search,
        "library": command.library,
    }
    queryset = supplier_services.list_suppliers(
        {k: v for k, v in filters.items() if v}
    )
    page = Paginator(queryset, command.page_size).get_page(command.page)
    return {
        "suppliers": SupplierListSerializer(page.object_list, many=True).data,
        "total": page.paginator.count,
        "page": page.number,
        "page_size": command.page_size,
    }


@execute.register
def _(command: actions.GetStatistics, *, user, context):
    return supplier_services.get_statistics()


@execute.register
def _(command: actions.GetSupplierDetail, *, user, context):
    supplier = supplier_services.get_supplier_detail(
        supplier_id=command.supplier_id
    )
    return {"supplier": SupplierDetailSerializer(supplier).data}


@execute.register
def _(command: actions.GetAuditTrail, *, user, context):
    records = supplier_services.get_audit_trail(
        supplier_id=command.supplier_id
    )
    return {"records": AuditRecordSerializer(records, many=True).data}


# --- Department library ---


@execute.register
def _(command: actions.EnableSupplier, *, user, context):
    supplier_services.enable_supplier(
        supplier_id=command.supplier_id,
        actor=user,
        context=context,
        library_type=command.library_type,
        reason=command.reason,
    )
    return SUCCESS


@execute.register
def _(command: actions.DisableSupplier, *, user, context):
    supplier_services.disable_supplier(
        supplier_id=command.supplier_id, context=context
    )
    return SUCCESS
