"""Administrator operations on accounts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from accounts.repositories.sql_repository import AccountRepository

logger = logging.getLogger(__name__)


@dataclass
class AccountAdministration:
    store: AccountRepository = field(default_factory=AccountRepository)

    def soft_delete(self, account_id: int) -> bool:
        """Mark the account deleted, keeping the row and its activation state."""
        logger.debug("Deleting account logically by id: %s", account_id)
        return self.store.soft_delete(account_id)
