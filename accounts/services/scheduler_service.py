"""
Scheduler service driving the daily expiry sweep.

The sweep runs on an APScheduler cron trigger (01:00 by default). Runs never
overlap: the job allows a single instance and coalesces missed triggers, and
``ExpirySweeper.run_scheduled`` skips when a previous run still holds its lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from accounts.core.config import Settings, get_settings
from accounts.services.expiry_sweeper import ExpirySweeper

logger = logging.getLogger(__name__)

JOB_ID = "expiry_sweep"


class SweepScheduler:
    """Owns the background scheduler and the expiry sweep job."""

    def __init__(
        self,
        sweeper: Optional[ExpirySweeper] = None,
        scheduler: Optional[BackgroundScheduler] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.sweeper = sweeper or ExpirySweeper()
        self.scheduler = scheduler or BackgroundScheduler(timezone=self.settings.sweep_timezone)
        self._stop = threading.Event()
        self._initialized = False

    def trigger(self) -> CronTrigger:
        return CronTrigger(
            hour=self.settings.sweep_cron_hour,
            minute=self.settings.sweep_cron_minute,
            timezone=self.settings.sweep_timezone,
        )

    def schedule(self):
        """Register (or replace) the sweep job without starting the scheduler."""
        # replace_existing is not applied to jobs queued before start()
        if self.scheduler.get_job(JOB_ID) is not None:
            self.scheduler.remove_job(JOB_ID)
        return self.scheduler.add_job(
            self.sweeper.run_scheduled,
            trigger=self.trigger(),
            id=JOB_ID,
            name="Delete not activated accounts",
            kwargs={"stop": self._stop},
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )

    def start(self):
        if not self._initialized:
            self._stop.clear()
            self.schedule()
            self.scheduler.start()
            self._initialized = True
            logger.info(
                "Expiry sweep scheduled daily at %02d:%02d %s",
                self.settings.sweep_cron_hour,
                self.settings.sweep_cron_minute,
                self.settings.sweep_timezone,
            )

    def stop(self, wait: bool = True):
        """Cancel an in-flight sweep between accounts and shut the scheduler down."""
        if self._initialized:
            self._stop.set()
            self.scheduler.shutdown(wait=wait)
            self._initialized = False
            logger.info("Expiry sweep scheduler stopped")
