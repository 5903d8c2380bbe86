"""
Application layer - Django-aware orchestrator for menu visibility and
backend-role administration.
Loads menus and grants, calls Domain for resolution, handles DB
transactions for role edits and assignments.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from core.exceptions import NotFound, ValidationError
from references.models import Terminal
from users import identity
from users.identity import IdentityContext
from users.models import UserTerminalRole
from .menus import resolve_visible_menus
from .models import MenuItem, BackendRole, MenuGrant, UserBackendRole

logger = logging.getLogger(__name__)

User = get_user_model()

ROLE_TERMINALS = (Terminal.DEPARTMENT, Terminal.ADMIN)


# --- MENU RESOLUTION ---


def get_active_menus(terminal: str):
    """Active menu items scoped to one terminal."""
    return MenuItem.objects.filter(terminal=terminal, is_active=True)


def resolve_menus(context: IdentityContext, terminal: str) -> list:
    """
    [APPLICATION SERVICE]
    Ordered menu items visible to an already-resolved principal.
    Only active roles scoped to `terminal` take part.
    """
    assigned_role_ids = list(
        UserBackendRole.objects.filter(
            user_id=context.principal_id,
            role__terminal=terminal,
            role__is_active=True,
        ).values_list("role_id", flat=True)
    )
    granted_keys = set()
    if assigned_role_ids:
        granted_keys = set(
            MenuGrant.objects.filter(
                role_id__in=assigned_role_ids
            ).values_list("menu__key", flat=True)
        )

    return resolve_visible_menus(
        terminal=terminal,
        terminal_roles=context.terminal_roles,
        active_menus=list(get_active_menus(terminal)),
        assigned_role_ids=assigned_role_ids,
        granted_keys=granted_keys,
    )


@transaction.atomic
def get_user_menus(*, user_id, terminal: str) -> list:
    """Resolves identity then visible menus for `terminal`."""
    return resolve_menus(identity.resolve(user_id), terminal)


# --- ROLE ADMINISTRATION ---


def _clean_role_fields(*, name, code, terminal, role_id=None) -> dict:
    """Validates the editable fields of a backend role."""
    name = (name or "").strip()
    code = (code or "").strip()
    errors = {}
    if not name:
        errors["name"] = "Role name is required."
    if not code:
        errors["code"] = "Role code is required."
    if terminal not in ROLE_TERMINALS:
        errors["terminal"] = (
            "Backend roles are scoped to the department or admin terminal."
        )
    if errors:
        raise ValidationError("Invalid role.", fields=errors)

    duplicates = BackendRole.objects.filter(code=code)
    if role_id is not None:
        duplicates = duplicates.exclude(pk=role_id)
    if duplicates.exists():
        raise ValidationError(
            f"Role code '{code}' is already in use.",
            fields={"code": "Must be unique."},
        )
    return {"name": name, "code": code, "terminal": terminal}


def _menus_for_keys(menu_keys, terminal: str) -> list:
    """Looks up menu items by key; all must belong to the role terminal."""
    keys = list(dict.fromkeys(menu_keys or []))
    menus = list(MenuItem.objects.filter(key__in=keys))
    missing = set(keys) - {m.key for m in menus}
    if missing:
        raise NotFound(f"Unknown menu keys: {', '.join(sorted(missing))}.")
    foreign = [m.key for m in menus if m.terminal != terminal]
    if foreign:
        raise ValidationError(
            f"Menus {', '.join(sorted(foreign))} do not belong to the "
            f"'{terminal}' terminal."
        )
    return menus


def _replace_grants(role: BackendRole, menus) -> None:
    MenuGrant.objects.filter(role=role).delete()
    MenuGrant.objects.bulk_create(
        [MenuGrant(role=role, menu=menu) for menu in menus]
    )


@transaction.atomic
def create_role(
    *,
    name: str,
    code: str,
    terminal: str = Terminal.DEPARTMENT,
    description: str = None,
    is_active: bool = True,
    menu_keys=(),
) -> BackendRole:
    """Creates a backend role together with its menu grants."""
    fields = _clean_role_fields(name=name, code=code, terminal=terminal)
    menus = _menus_for_keys(menu_keys, fields["terminal"])

    role = BackendRole.objects.create(
        description=description, is_active=is_active, **fields
    )
    _replace_grants(role, menus)
    logger.info(
        "Created backend role '%s' with %d grants", role.code, len(menus)
    )
    return role


@transaction.atomic
def update_role(
    *,
    role_id,
    name: str,
    code: str,
    terminal: str = None,
    description: str = None,
    is_active: bool = None,
    menu_keys=None,
) -> BackendRole:
    """
    Edits a role and, when `menu_keys` is given, replaces its grants
    (delete-then-insert) in one transaction so readers never see the
    role without grants.
    """
    try:
        role = BackendRole.objects.select_for_update().get(pk=role_id)
    except BackendRole.DoesNotExist:
        raise NotFound(f"Backend role '{role_id}' does not exist.")

    fields = _clean_role_fields(
        name=name,
        code=code,
        terminal=terminal or role.terminal,
        role_id=role.pk,
    )
    if menu_keys is None:
        menu_keys = role.grants.values_list("menu__key", flat=True)
    menus = _menus_for_keys(menu_keys, fields["terminal"])

    for attr, value in fields.items():
        setattr(role, attr, value)
    role.description = description
    if is_active is not None:
        role.is_active = is_active
    role.save()

    _replace_grants(role, menus)
    logger.info(
        "Updated backend role '%s' with %d grants", role.code, len(menus)
    )
    return role


@transaction.atomic
def delete_role(*, role_id) -> None:
    """Deletes a role; grants and assignments cascade."""
    deleted, _ = BackendRole.objects.filter(pk=role_id).delete()
    if not deleted:
        raise NotFound(f"Backend role '{role_id}' does not exist.")
    logger.info("Deleted backend role %s", role_id)


@transaction.atomic
def assign_user_roles(*, user_id, role_ids) -> list:
    """
    Replaces a principal's backend roles (delete-then-insert).
    The user row is locked so concurrent reassignments serialize.
    """
    try:
        user = User.objects.select_for_update().get(pk=user_id)
    except User.DoesNotExist:
        raise NotFound(f"Principal '{user_id}' does not exist.")

    wanted = list(dict.fromkeys(role_ids or []))
    roles = list(BackendRole.objects.filter(pk__in=wanted))
    missing = set(wanted) - {r.pk for r in roles}
    if missing:
        raise NotFound(
            "Unknown backend roles: "
            f"{', '.join(str(m) for m in sorted(missing))}."
        )

    UserBackendRole.objects.filter(user=user).delete()
    UserBackendRole.objects.bulk_create(
        [UserBackendRole(user=user, role=role) for role in roles]
    )
    logger.info("Assigned roles %s to user %s", wanted, user.pk)
    return roles


def get_roles_data(*, terminal: str) -> dict:
    """
    [APPLICATION SERVICE]
    Roles with their granted menu keys, the terminal's active menus and
    the principals holding the terminal with their backend-role ids.
    """
    roles = BackendRole.objects.prefetch_related("grants__menu")
    menus = get_active_menus(terminal).order_by("sort_order", "key")

    target_role = (
        Terminal.ADMIN if terminal == Terminal.ADMIN else Terminal.DEPARTMENT
    )
    user_ids = UserTerminalRole.objects.filter(role=target_role).values_list(
        "user_id", flat=True
    )
    users = User.objects.filter(pk__in=user_ids).prefetch_related(
        "backend_role_links"
    )

    return {
        "roles": [
            {
                "id": role.pk,
                "code": role.code,
                "name": role.name,
                "description": role.description,
                "terminal": role.terminal,
                "is_active": role.is_active,
                "menu_permissions": sorted(
                    g.menu.key for g in role.grants.all()
                ),
            }
            for role in roles
        ],
        "menus": [
            {
                "key": m.key,
                "name": m.name,
                "path": m.path,
                "parent_key": m.parent_key,
                "sort_order": m.sort_order,
            }
            for m in menus
        ],
        "users": [
            {
                "id": user.pk,
                "email": user.email,
                "full_name": user.full_name,
                "backend_roles": sorted(
                    link.role_id for link in user.backend_role_links.all()
                ),
            }
            for user in users.order_by("email")
        ],
    }
