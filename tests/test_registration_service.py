from __future__ import annotations

import pytest

from accounts.domain.contracts import ProfileUpdate
from accounts.domain.errors import LoginAlreadyUsedError, RegistrationError, RoleNotFoundError
from accounts.repositories.sql_repository import AccountRepository


def test_new_account_is_pending_with_key_and_first_role_only(register, hasher, clock):
    account = register("alice", role_ids=["ROLE_USER", "ROLE_ADMIN"], email="alice@example.com", lang_key="en")

    assert account.id is not None
    assert account.activated is False
    assert account.activation_key
    assert account.pending
    assert account.created_date == clock.now
    assert account.authority_names == {"ROLE_USER"}
    assert account.deleted is False
    assert account.password_hash != "secret-pass"
    assert hasher.verify("secret-pass", account.password_hash)

    stored = AccountRepository().find_by_login("alice")
    assert stored == account
    assert stored.authority_names == {"ROLE_USER"}


def test_only_the_first_role_is_resolved(register):
    account = register("root", role_ids=["ROLE_ADMIN", "ROLE_GHOST"])
    assert account.authority_names == {"ROLE_ADMIN"}


def test_unknown_first_role_fails_without_writing(register):
    with pytest.raises(RoleNotFoundError) as excinfo:
        register("alice", role_ids=["ROLE_GHOST", "ROLE_USER"])

    assert excinfo.value.role_id == "ROLE_GHOST"
    assert AccountRepository().find_by_login("alice") is None


@pytest.mark.parametrize(
    "login,password,role_ids",
    [("", "pw", ["ROLE_USER"]), ("   ", "pw", ["ROLE_USER"]), ("bob", "", ["ROLE_USER"]), ("bob", "pw", [])],
)
def test_invalid_input_is_rejected(register, login, password, role_ids):
    with pytest.raises(RegistrationError):
        register(login, password=password, role_ids=role_ids)


def test_each_registration_gets_its_own_key(register):
    first = register("alice")
    second = register("bob")
    assert first.activation_key != second.activation_key


def test_duplicate_login_is_refused_by_the_store(register):
    register("alice")
    with pytest.raises(LoginAlreadyUsedError):
        register("alice")


def test_profile_attributes_and_deleted_flag_are_stored(register):
    account = register(
        "carol",
        first_name="Carol",
        last_name="Jones",
        deleted=True,
        profile=ProfileUpdate(login="ignored", phone="555-0100", age=31, classes="3B", first_name="Ignored"),
    )

    assert account.login == "carol"
    assert account.first_name == "Carol"
    assert account.phone == "555-0100"
    assert account.age == 31
    assert account.classes == "3B"
    assert account.deleted is True
