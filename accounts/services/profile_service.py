"""Profile mutation for the account owner and for administrators acting on their behalf."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from accounts.domain.account import Account
from accounts.domain.contracts import ProfileUpdate
from accounts.domain.errors import AccountNotFoundError
from accounts.repositories.sql_repository import AccountRepository

logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    """
    Both entry points copy the same field set; they differ only in how the
    target account is resolved. A missing account is a silent no-op and the
    call returns ``False``.

    Renaming ``login`` is allowed on both paths. Uniqueness is enforced by the
    store, which raises ``LoginAlreadyUsedError``; invalidating sessions that
    were issued for the old login is left to the caller.
    """

    store: AccountRepository = field(default_factory=AccountRepository)

    def update_self(self, current_login: str, fields: ProfileUpdate) -> bool:
        return self._update(current_login, fields)

    def update_other(self, target_login: str, fields: ProfileUpdate) -> bool:
        return self._update(target_login, fields)

    def get_with_authorities(self, current_login: str) -> Account:
        account = self.store.find_by_login(current_login)
        if account is None:
            raise AccountNotFoundError(current_login)
        return account

    def _update(self, login: str, fields: ProfileUpdate) -> bool:
        account = self.store.find_by_login(login)
        if account is None:
            logger.debug("Profile update skipped, no account %s", login)
            return False
        fields.apply_to(account)
        saved = self.store.save(account)
        if saved is None:
            logger.debug("Profile update skipped, account %s removed or deleted concurrently", login)
            return False
        logger.debug("Changed information for account: %s", saved)
        return True
