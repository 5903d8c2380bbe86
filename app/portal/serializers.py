"""
Serializers validating the parameters of each portal action.
"""

from rest_framework import serializers

from access.services import ROLE_TERMINALS
from references.models import Terminal
from suppliers.filters import SupplierFilter
from suppliers.models import Supplier, DepartmentSupplierLink
from . import actions


class DispatchSerializer(serializers.Serializer):
    """Envelope of every portal call: {"action": ..., "params": {...}}."""

    action = serializers.CharField()
    params = serializers.DictField(required=False, default=dict)


class TerminalParamsSerializer(serializers.Serializer):
    terminal = serializers.ChoiceField(choices=Terminal.choices)


class SupplierParamsSerializer(serializers.Serializer):
    supplier_id = serializers.IntegerField(min_value=1)


class ReasonParamsSerializer(SupplierParamsSerializer):
    reason = serializers.CharField(trim_whitespace=True)


class OptionalReasonParamsSerializer(SupplierParamsSerializer):
    reason = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )


class RoleParamsSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    code = serializers.CharField(max_length=50)
    terminal = serializers.ChoiceField(
        choices=[t for t in Terminal.choices if t[0] in ROLE_TERMINALS],
        required=False,
    )
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    is_active = serializers.BooleanField(required=False)
    menu_keys = serializers.ListField(
        child=serializers.CharField(), required=False
    )


class UpdateRoleParamsSerializer(RoleParamsSerializer):
    role_id = serializers.IntegerField(min_value=1)


class RoleIdParamsSerializer(serializers.Serializer):
    role_id = serializers.IntegerField(min_value=1)


class AssignUserRolesParamsSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(min_value=1)
    role_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), allow_empty=True
    )


class UserTerminalsParamsSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(min_value=1)
    terminals = serializers.ListField(
        child=serializers.ChoiceField(choices=Terminal.choices),
        allow_empty=True,
    )


class UserDepartmentParamsSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(min_value=1)
    department_id = serializers.IntegerField(min_value=1, allow_null=True)
    is_manager = serializers.BooleanField(required=False)


class RolesDataParamsSerializer(serializers.Serializer):
    terminal = serializers.ChoiceField(
        choices=[t for t in Terminal.choices if t[0] in ROLE_TERMINALS],
        required=False,
    )


class ListSuppliersParamsSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=Supplier.Status.choices, required=False, allow_null=True
    )
    supplier_type = serializers.ChoiceField(
        choices=Supplier.SupplierType.choices,
        required=False,
        allow_null=True,
    )
    search = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    library = serializers.ChoiceField(
        choices=SupplierFilter.LIBRARY_CHOICES, required=False
    )
    page = serializers.IntegerField(min_value=1, required=False)
    page_size = serializers.IntegerField(
        min_value=1, max_value=100, required=False
    )


class EmptyParamsSerializer(serializers.Serializer):
    pass


class EnableSupplierParamsSerializer(SupplierParamsSerializer):
    library_type = serializers.ChoiceField(
        choices=DepartmentSupplierLink.LibraryType.choices,
        required=False,
        allow_null=True,
    )
    reason = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )


PARAMETER_SERIALIZERS = {
    actions.GetUserMenus: TerminalParamsSerializer,
    actions.Approve: SupplierParamsSerializer,
    actions.Reject: ReasonParamsSerializer,
    actions.Suspend: OptionalReasonParamsSerializer,
    actions.Restore: SupplierParamsSerializer,
    actions.Delete: SupplierParamsSerializer,
    actions.Blacklist: ReasonParamsSerializer,
    actions.Unblacklist: SupplierParamsSerializer,
    actions.Recommend: OptionalReasonParamsSerializer,
    actions.Unrecommend: SupplierParamsSerializer,
    actions.AddObjection: ReasonParamsSerializer,
    actions.RemoveObjection: SupplierParamsSerializer,
    actions.CreateRole: RoleParamsSerializer,
    actions.UpdateRole: UpdateRoleParamsSerializer,
    actions.DeleteRole: RoleIdParamsSerializer,
    actions.AssignUserRoles: AssignUserRolesParamsSerializer,
    actions.UpdateUserTerminals: UserTerminalsParamsSerializer,
    actions.UpdateUserDepartment: UserDepartmentParamsSerializer,
    actions.GetRolesData: RolesDataParamsSerializer,
    actions.ListSuppliers: ListSuppliersParamsSerializer,
    actions.GetStatistics: EmptyParamsSerializer,
    actions.GetSupplierDetail: SupplierParamsSerializer,
    actions.GetAuditTrail: SupplierParamsSerializer,
    actions.EnableSupplier: EnableSupplierParamsSerializer,
    actions.DisableSupplier: SupplierParamsSerializer,
}
