"""Transition of pending accounts to active."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from accounts.domain.account import Account
from accounts.domain.errors import ActivationNotFoundError
from accounts.repositories.sql_repository import AccountRepository

logger = logging.getLogger(__name__)


@dataclass
class ActivationService:
    store: AccountRepository = field(default_factory=AccountRepository)

    def activate(self, key: str) -> Optional[Account]:
        """
        Activate the pending account holding ``key`` and clear the key.

        Returns ``None`` when no pending account holds the key. That covers an
        unknown key, a key already consumed, and an account swept or
        soft-deleted between the lookup and the write; callers must not assume
        which one happened. Only the lifecycle columns are written, so profile
        changes made in between are kept.
        """
        key = (key or "").strip()
        if not key:
            return None
        account = self.store.find_by_activation_key(key)
        if account is None:
            logger.debug("No pending account for the supplied activation key")
            return None

        saved = self.store.activate(key)
        if saved is None:
            logger.info("Account %s was removed before its activation completed", account.login)
            return None
        logger.debug("Activated account: %s", saved)
        return saved

    def activate_or_raise(self, key: str) -> Account:
        account = self.activate(key)
        if account is None:
            raise ActivationNotFoundError("No pending account for this activation key")
        return account
