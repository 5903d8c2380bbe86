"""
Domain layer - pure, Django-unaware menu visibility resolution.

Visibility fails open: a principal with no backend role, or whose roles
grant nothing, sees every active menu of the terminal. Admin-terminal
menus are never filtered by backend roles.
"""

ADMIN_TERMINAL = "admin"


def order_menus(menus) -> list:
    """Orders by (parent_key, sort_order); top-level entries come first."""
    return sorted(
        menus,
        key=lambda m: (
            m.parent_key is not None,
            m.parent_key or "",
            m.sort_order,
            m.key,
        ),
    )


def resolve_visible_menus(
    *,
    terminal: str,
    terminal_roles,
    active_menus,
    assigned_role_ids,
    granted_keys,
) -> list:
    """
    Computes the ordered menus a principal may see in `terminal`.

    `active_menus` are the active items scoped to the terminal,
    `assigned_role_ids` the principal's backend roles for the terminal and
    `granted_keys` the union of menu keys those roles grant.
    """
    if terminal not in terminal_roles:
        return []

    ordered = order_menus(active_menus)

    if terminal == ADMIN_TERMINAL:
        return ordered

    # No backend role configured for this principal
    if not assigned_role_ids:
        return ordered

    # Roles exist but grant nothing: treated as unrestricted
    if not granted_keys:
        return ordered

    return [m for m in ordered if m.key in granted_keys]
