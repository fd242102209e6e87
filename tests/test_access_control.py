from typing_exam.models.users import Role
from typing_exam.services.access_control import AccessControlStore


def test_unassigned_identity_is_guest():
    acl = AccessControlStore()
    assert acl.get_role("nobody") == Role.guest
    assert acl.has_permission("nobody", Role.guest)
    assert not acl.has_permission("nobody", Role.user)
    assert not acl.has_permission("nobody", Role.admin)
    assert not acl.is_admin("nobody")


def test_user_role_grants_user_but_not_admin():
    acl = AccessControlStore()
    acl.assign_role("root", "alice", Role.user)
    assert acl.has_permission("alice", Role.user)
    assert not acl.has_permission("alice", Role.admin)


def test_admin_is_superset_of_user():
    acl = AccessControlStore()
    acl.assign_role("root", "boss", Role.admin)
    assert acl.has_permission("boss", Role.admin)
    assert acl.has_permission("boss", Role.user)
    assert acl.is_admin("boss")


def test_assign_overwrites_previous_role():
    acl = AccessControlStore()
    acl.assign_role("root", "alice", Role.user)
    assert not acl.has_permission("alice", Role.admin)
    acl.assign_role("root", "alice", Role.admin)
    assert acl.has_permission("alice", Role.admin)


def test_has_any_admin():
    acl = AccessControlStore()
    assert not acl.has_any_admin()
    acl.assign_role("x", "x", Role.user)
    assert not acl.has_any_admin()
    acl.assign_role("x", "x", Role.admin)
    assert acl.has_any_admin()
