"""Permission levels: parsing user input, describing levels and checking users."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from .models import Permission

_FROM_STRING = {
    "ALL": Permission.ALL,
    "MOD": Permission.MOD,
    "GUILD OWNER": Permission.GUILD_OWNER,
    "GO": Permission.GUILD_OWNER,
    "NONE": Permission.NONE,
    "MASTER": Permission.MASTER,
}

_ASSIGNABLE_NAMES = {
    Permission.ALL: "All",
    Permission.MOD: "Mod",
    Permission.GUILD_OWNER: "Guild Owner",
    Permission.NONE: "None",
    Permission.MASTER: "Master",
}

_USER_FACING_NAMES = {
    Permission.ALL: "Normal User",
    Permission.MOD: "Mod",
    Permission.GUILD_OWNER: "Guild Owner",
    Permission.NONE: "How did you get this role...?",
    Permission.MASTER: "Master",
}

_ASSIGNABLE_ROLES = "{All, Mod}"


def _as_permission(p: int) -> Permission | None:
    try:
        return Permission(p)
    except ValueError:
        return None


def get_permission_from_string(s: str) -> Permission:
    """Parse a permission level typed by a user, ignoring case.

    Raises ValueError when the text names no permission level.
    """
    try:
        return _FROM_STRING[s.upper()]
    except KeyError:
        raise ValueError(f"unknown permission level: {s!r}") from None


def sprint_permission(p: int) -> str:
    """Name a permission level the way a user would type it."""
    return _ASSIGNABLE_NAMES.get(_as_permission(p), "Unknown")


def get_permission_string(p: int) -> str:
    """Describe a permission level for showing to a user."""
    return _USER_FACING_NAMES.get(_as_permission(p), "Unknown")


def is_assignable_permission_level(p: int) -> bool:
    """Only the All and Mod levels may be given to roles by the bot."""
    return p in (Permission.MOD, Permission.ALL)


def assignable_roles() -> str:
    """List the permission levels that may be assigned, for help text."""
    return _ASSIGNABLE_ROLES


def is_guild_owner(guild_owner_id: str, user_id: str) -> bool:
    return guild_owner_id == user_id


def _no_role_permissions(roles: Sequence[str]) -> list[int]:
    return []


@dataclass
class PermissionChecker:
    """Decides whether a user may do something that needs a permission level.

    ``role_permissions`` maps a user's role IDs to the permission levels
    stored for those roles.
    """

    master_id: str = ""
    role_permissions: Callable[[Sequence[str]], Iterable[int]] = field(
        default=_no_role_permissions, repr=False, compare=False
    )

    def is_master(self, user_id: str) -> bool:
        return self.master_id == user_id

    def has_permission(
        self, user_id: str, roles: Sequence[str], guild_owner_id: str, perm: int
    ) -> bool:
        if perm == Permission.ALL:
            return True
        if self.is_master(user_id):
            return True
        if is_guild_owner(guild_owner_id, user_id) and perm <= Permission.GUILD_OWNER:
            return True
        if perm == Permission.NONE:
            return False
        return any(level >= perm for level in self.role_permissions(list(roles)))

    def has_all_perm(self, user_id: str, roles: Sequence[str], guild_owner_id: str) -> bool:
        return self.has_permission(user_id, roles, guild_owner_id, Permission.ALL)

    def has_mod_perm(self, user_id: str, roles: Sequence[str], guild_owner_id: str) -> bool:
        return self.has_permission(user_id, roles, guild_owner_id, Permission.MOD)