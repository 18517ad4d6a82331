import pytest

from moebot.models import Permission
from moebot.permissions import (
    PermissionChecker,
    assignable_roles,
    get_permission_from_string,
    get_permission_string,
    is_assignable_permission_level,
    is_guild_owner,
    sprint_permission,
)

ROLE_LEVELS = {"modrole": Permission.MOD, "plainrole": Permission.ALL}


def _lookup(roles):
    return [ROLE_LEVELS[r] for r in roles if r in ROLE_LEVELS]


@pytest.fixture
def checker():
    return PermissionChecker(master_id="master", role_permissions=_lookup)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("all", Permission.ALL),
        ("Mod", Permission.MOD),
        ("guild owner", Permission.GUILD_OWNER),
        ("GO", Permission.GUILD_OWNER),
        ("none", Permission.NONE),
        ("MASTER", Permission.MASTER),
    ],
)
def test_permission_from_string(text, expected):
    assert get_permission_from_string(text) == expected


def test_permission_from_string_unknown():
    with pytest.raises(ValueError):
        get_permission_from_string("admin")


@pytest.mark.parametrize("perm", list(Permission))
def test_sprint_round_trip(perm):
    assert get_permission_from_string(sprint_permission(perm)) == perm


def test_sprint_values():
    assert sprint_permission(Permission.GUILD_OWNER) == "Guild Owner"
    assert sprint_permission(7) == "Unknown"


def test_permission_string_values():
    assert get_permission_string(Permission.ALL) == "Normal User"
    assert get_permission_string(Permission.NONE) == "How did you get this role...?"
    assert get_permission_string(3) == "Unknown"


def test_assignable():
    assert is_assignable_permission_level(Permission.ALL)
    assert is_assignable_permission_level(Permission.MOD)
    assert not is_assignable_permission_level(Permission.MASTER)
    assert assignable_roles() == "{All, Mod}"


def test_is_guild_owner():
    assert is_guild_owner("owner", "owner")
    assert not is_guild_owner("owner", "other")


def test_all_perm_always_allowed(checker):
    assert checker.has_all_perm("nobody", [], "owner")


def test_master_allowed_everything(checker):
    assert checker.is_master("master")
    assert checker.has_permission("master", [], "owner", Permission.NONE)
    assert checker.has_permission("master", [], "owner", Permission.MASTER)


def test_guild_owner_limits(checker):
    assert checker.has_permission("owner", [], "owner", Permission.GUILD_OWNER)
    assert checker.has_mod_perm("owner", [], "owner")
    assert not checker.has_permission("owner", [], "owner", Permission.MASTER)


def test_none_denied_to_regular_users(checker):
    assert not checker.has_permission("user", ["modrole"], "owner", Permission.NONE)


def test_role_levels(checker):
    assert checker.has_mod_perm("user", ["plainrole", "modrole"], "owner")
    assert not checker.has_mod_perm("user", ["plainrole"], "owner")
    assert not checker.has_permission("user", ["modrole"], "owner", Permission.GUILD_OWNER)


def test_default_checker_has_no_role_levels():
    assert not PermissionChecker(master_id="m").has_mod_perm("user", ["modrole"], "owner")