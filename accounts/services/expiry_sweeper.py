"""
Purge of registrations that were never activated.

``sweep(now)`` is the whole job; the periodic trigger lives in
``scheduler_service``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Optional

from accounts.core.config import get_settings
from accounts.core.utils import as_utc, utc_now
from accounts.domain.errors import StoreUnavailableError
from accounts.repositories.sql_repository import AccountRepository

logger = logging.getLogger(__name__)


@dataclass
class SweepReport:
    cutoff: datetime
    removed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    cancelled: bool = False


def _default_retention() -> timedelta:
    return timedelta(days=get_settings().activation_retention_days)


@dataclass
class ExpirySweeper:
    """
    Hard-deletes pending accounts created before ``now - retention``.

    Each delete is conditional on the account still being pending, so an
    account activated between the read and the delete is left alone and
    reported under ``skipped``.
    """

    store: AccountRepository = field(default_factory=AccountRepository)
    clock: Callable[[], datetime] = utc_now
    retention: timedelta = field(default_factory=_default_retention)
    _running: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def sweep(self, now: Optional[datetime] = None, stop: Optional[threading.Event] = None) -> SweepReport:
        now = as_utc(now) or self.clock()
        report = SweepReport(cutoff=now - self.retention)
        candidates = self.store.find_pending_created_before(report.cutoff)
        logger.debug("Found %d not activated accounts created before %s", len(candidates), report.cutoff)

        for index, account in enumerate(candidates):
            if stop is not None and stop.is_set():
                report.cancelled = True
                logger.info("Expiry sweep cancelled with %d accounts left", len(candidates) - index)
                break
            try:
                removed = self.store.conditional_delete(account.id, expected_activated=False)
            except StoreUnavailableError as exc:
                logger.error("Failed to delete not activated account %s: %s", account.login, exc)
                report.failed.append(account.login)
                continue
            if removed:
                logger.info("Deleted not activated account %s", account.login)
                report.removed.append(account.login)
            else:
                logger.debug("Account %s left the pending state before it could be deleted", account.login)
                report.skipped.append(account.login)
        return report

    def run_scheduled(self, stop: Optional[threading.Event] = None) -> Optional[SweepReport]:
        """Timer entry point: returns ``None`` without sweeping if a run is still in progress."""
        if not self._running.acquire(blocking=False):
            logger.warning("Previous expiry sweep still running, skipping this trigger")
            return None
        try:
            return self.sweep(stop=stop)
        finally:
            self._running.release()
