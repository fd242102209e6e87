import pytest

from typing_exam.core.errors import ProfileExists
from typing_exam.models.users import Role
from typing_exam.services.bootstrap import SAMPLE_PASSAGES

ADMIN_MOBILE = "8055926965"


def test_seed_inserts_samples(admin_backend):
    admin_backend.seed_data("root")
    titles = {p.title for p in admin_backend.get_passages("root")}
    assert titles == {title for title, _, _ in SAMPLE_PASSAGES}


def test_seed_is_idempotent(admin_backend):
    admin_backend.seed_data("root")
    once = admin_backend.get_passages("root")
    admin_backend.seed_data("root")
    assert admin_backend.get_passages("root") == once


def test_seed_noop_when_passages_exist(admin_backend):
    admin_backend.add_passage("root", "Mine", "content", 1)
    admin_backend.seed_data("root")
    assert [p.title for p in admin_backend.get_passages("root")] == ["Mine"]


def test_add_admin_creates_well_known_account(admin_backend):
    b = admin_backend
    b.add_admin("root")

    assert b.directory.find_identity(ADMIN_MOBILE) == "root"
    assert b.is_caller_admin("root")
    assert b.login("anon", ADMIN_MOBILE, "admin@123").session_token


def test_add_admin_is_idempotent(admin_backend):
    b = admin_backend
    b.add_admin("root")
    b.add_admin("root")
    assert len(b.directory) == 1
    assert b.directory.find_identity(ADMIN_MOBILE) == "root"


def test_add_admin_by_second_admin_is_noop(admin_backend):
    b = admin_backend
    b.add_admin("root")
    b.assign_caller_user_role("root", "other-admin", Role.admin)
    b.add_admin("other-admin")
    assert b.directory.find_identity(ADMIN_MOBILE) == "root"
    assert b.get_caller_user_profile("other-admin") is None


def test_add_admin_refuses_caller_with_existing_profile(admin_backend):
    b = admin_backend
    b.register_user("root", "Root", "9990009999", "pw")
    with pytest.raises(ProfileExists):
        b.add_admin("root")
    assert not b.directory.is_registered(ADMIN_MOBILE)
