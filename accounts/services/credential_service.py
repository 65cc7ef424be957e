"""Password rotation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from accounts.core.security import CredentialHasher
from accounts.repositories.sql_repository import AccountRepository

logger = logging.getLogger(__name__)


@dataclass
class CredentialRotationService:
    """
    Rehashes and stores new passwords. Both entry points persist through the
    same targeted ``update_password_hash`` write, so a rotation never races
    with a concurrent profile save over the hash column.
    """

    store: AccountRepository = field(default_factory=AccountRepository)
    hasher: CredentialHasher = field(default_factory=CredentialHasher)

    def change_own_password(self, current_login: str, new_password: str) -> bool:
        return self._rotate(current_login, new_password)

    def set_password_by_id(self, current_login: str, new_password: str) -> bool:
        return self._rotate(current_login, new_password)

    def check_password(self, login: str, password: str) -> bool:
        account = self.store.find_by_login(login)
        if account is None:
            return False
        return self.hasher.verify(password, account.password_hash)

    def _rotate(self, login: str, new_password: str) -> bool:
        if not new_password:
            raise ValueError("New password is required")
        account = self.store.find_by_login(login)
        if account is None:
            logger.debug("Password change skipped, no account %s", login)
            return False
        changed = self.store.update_password_hash(account.id, self.hasher.hash(new_password))
        if changed:
            logger.debug("Changed password for account %s", login)
        return changed
