# tests/test_permissions.py

"""
Tests for the policy table and its evaluation.

EXPECTED is written out by hand, row by row, and compared against every
(role, kind, operation) combination the engine can see.
"""

import itertools

import pytest

from core.errors import Forbidden, Unauthenticated
from core.permission_helpers import authorize, is_allowed
from core.permissions import POLICY
from dependencies.auth import Identity
from models.enums import EntityKind, Operation, Role


ALL = "ALL"

READS = ("list_all", "get", "search")

# kind -> {operation: roles}; "ALL" = any authenticated role, () = nobody
EXPECTED = {
    "citizen": {
        "create": ("DMV", "IT"),
        "update": ALL,
        "delete": ("IT",),
        "read": ALL,
    },
    "vehicle": {
        "create": ("DMV", "IT"),
        "update": ("DMV", "IT"),
        "delete": ("IT",),
        "read": ALL,
    },
    "business": {
        "create": ("IRS", "IT"),
        "update": ("IRS", "IT"),
        "delete": (),
        "read": ("IRS", "IT"),
    },
    "property": {
        "create": ("IRS", "IT"),
        "update": ("IRS", "IT"),
        "delete": (),
        "read": ("IRS", "IT"),
    },
    "permit": {
        "create": ("DMV", "IT"),
        "update": ("DMV", "IT"),
        "delete": (),
        "read": ("DMV", "IT"),
    },
    "criminal_record": {
        "create": ("MPD", "FHP", "FSD", "ICE", "IT"),
        "update": ("MPD", "FHP", "FSD", "ICE", "IT"),
        "delete": (),
        "read": ("MPD", "FHP", "FSD", "ICE", "IT"),
    },
    "user": {
        "create": ("IT", "Director_MPD", "Director_FHP", "Director_FSD"),
        "update": ("IT", "Director_MPD", "Director_FHP", "Director_FSD"),
        "delete": ("IT",),
        "read": ("IT", "Director_MPD", "Director_FHP", "Director_FSD"),
    },
    "driver_license": {
        "create": ("DMV", "IT"),
        "update": ("DMV", "IT"),
        "delete": (),
        "read": ("DMV", "MPD", "FHP", "FSD", "IT"),
    },
}


def expected_allowed(role: Role, kind: EntityKind, operation: Operation) -> bool:
    row = EXPECTED[kind.value]
    roles = row["read"] if operation.value in READS else row[operation.value]
    return roles == ALL or role.value in roles


def identity(role: Role, user_id: int = 1, is_active: bool = True) -> Identity:
    return Identity(id=user_id, username=f"user{user_id}", role=role, is_active=is_active)


# -----------------------------------------------------
# Table shape
# -----------------------------------------------------
def test_policy_covers_every_kind_and_operation():
    """No (kind, operation) pair is missing from the table."""
    assert set(POLICY) == set(EntityKind)
    for kind in EntityKind:
        assert set(POLICY[kind]) == set(Operation)


# -----------------------------------------------------
# Exhaustive cross-product
# -----------------------------------------------------
@pytest.mark.parametrize(
    "role,kind,operation",
    list(itertools.product(Role, EntityKind, Operation)),
    ids=lambda v: str(v),
)
def test_policy_matches_expected_table(role, kind, operation):
    """Every role × kind × operation decision matches the hand-written table."""
    # target 999 so user deletes are never self-deletes here
    allowed = is_allowed(identity(role), kind, operation, target_id=999)
    assert allowed == expected_allowed(role, kind, operation)


@pytest.mark.parametrize("role", list(Role))
def test_denied_operation_raises_forbidden(role):
    """Business delete is closed to every role."""
    with pytest.raises(Forbidden):
        authorize(identity(role), EntityKind.business, Operation.delete)


def test_directors_do_not_inherit_department_access():
    """Director_MPD is not MPD: no criminal records, no driver licenses."""
    director = identity(Role.DIRECTOR_MPD)
    assert not is_allowed(director, EntityKind.criminal_record, Operation.create)
    assert not is_allowed(director, EntityKind.driver_license, Operation.list_all)
    assert is_allowed(director, EntityKind.user, Operation.update)


# -----------------------------------------------------
# Absent / inactive identities
# -----------------------------------------------------
@pytest.mark.parametrize("kind,operation", list(itertools.product(EntityKind, Operation)))
def test_absent_identity_denied_everything(kind, operation):
    with pytest.raises(Unauthenticated):
        authorize(None, kind, operation)


@pytest.mark.parametrize("kind,operation", list(itertools.product(EntityKind, Operation)))
def test_inactive_identity_denied_everything(kind, operation):
    """Even IT is refused once the account is switched off."""
    assert not is_allowed(identity(Role.IT, is_active=False), kind, operation)


# -----------------------------------------------------
# Self-deletion
# -----------------------------------------------------
def test_it_cannot_delete_itself():
    me = identity(Role.IT, user_id=7)
    with pytest.raises(Forbidden) as exc:
        authorize(me, EntityKind.user, Operation.delete, target_id=7)
    assert "own account" in exc.value.detail


def test_self_deletion_check_accepts_path_strings():
    """Path params arrive as strings."""
    me = identity(Role.IT, user_id=7)
    assert not is_allowed(me, EntityKind.user, Operation.delete, target_id="7")
    assert is_allowed(me, EntityKind.user, Operation.delete, target_id="8")


def test_self_deletion_rule_only_applies_to_users():
    me = identity(Role.IT, user_id=7)
    assert is_allowed(me, EntityKind.citizen, Operation.delete, target_id=7)


# -----------------------------------------------------
# Through the HTTP layer
# -----------------------------------------------------
def test_denial_happens_before_body_validation(client, actor):
    """A DMV clerk posting garbage to criminal records gets 403, not 400."""
    clerk = actor(Role.DMV)
    response = client.post("/api/criminal-records", json={"nonsense": True}, headers=clerk.headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "Access denied"


def test_missing_token_is_401(client):
    response = client.get("/api/citizens")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_garbage_token_is_401(client):
    response = client.get("/api/citizens", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_nested_reads_follow_child_policy(client, actor, create_citizen):
    """A DMV clerk can see a citizen but not the citizen's criminal records."""
    citizen = create_citizen()
    clerk = actor(Role.DMV)

    assert client.get(f"/api/citizens/{citizen['id']}", headers=clerk.headers).status_code == 200
    response = client.get(f"/api/citizens/{citizen['id']}/criminal-records", headers=clerk.headers)
    assert response.status_code == 403


def test_routes_share_one_permission_dependency():
    """Routers take requires_permission from core.permission_helpers only."""
    from core import permission_helpers
    from dependencies import auth
    from routers import citizens, crud

    assert not hasattr(auth, "requires_permission")
    assert crud.requires_permission is permission_helpers.requires_permission
    assert citizens.requires_permission is permission_helpers.requires_permission
