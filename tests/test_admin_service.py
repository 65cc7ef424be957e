from __future__ import annotations

from accounts.repositories.sql_repository import AccountRepository
from accounts.services.activation_service import ActivationService
from accounts.services.admin_service import AccountAdministration


def test_soft_delete_keeps_row_and_activation_state(register):
    account = register("alice")
    ActivationService().activate(account.activation_key)

    assert AccountAdministration().soft_delete(account.id) is True

    repo = AccountRepository()
    stored = repo.find_by_id(account.id)
    assert stored.deleted is True
    assert stored.activated is True
    assert stored.activation_key is None
    assert repo.find_by_login("alice") is None


def test_soft_delete_of_unknown_id(db_env):
    assert AccountAdministration().soft_delete(12345) is False
