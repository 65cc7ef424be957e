import logging
from datetime import timedelta

import pytest

from apscheduler.triggers.cron import CronTrigger
from accounts.core.config import get_settings
from accounts.services.expiry_sweeper import ExpirySweeper
from accounts.services.scheduler_service import JOB_ID, SweepScheduler


@pytest.fixture(autouse=True)
def patch_logging(monkeypatch):
    """Silence the scheduler logger for cleaner test output."""
    monkeypatch.setattr(
        "accounts.services.scheduler_service.logger",
        logging.getLogger("test_scheduler_service"),
    )
    yield


@pytest.fixture
def service(db_env, clock):
    service = SweepScheduler(sweeper=ExpirySweeper(clock=clock, retention=timedelta(days=3)))
    yield service
    if service._initialized:
        service.stop(wait=False)


def test_schedule_registers_daily_cron_job(service):
    service.schedule()

    job = service.scheduler.get_job(JOB_ID)
    assert job is not None
    assert isinstance(job.trigger, CronTrigger)
    assert job.max_instances == 1
    assert job.coalesce is True
    assert job.kwargs["stop"] is service._stop

    fields = {f.name: str(f) for f in job.trigger.fields}
    assert fields["hour"] == str(get_settings().sweep_cron_hour)
    assert fields["minute"] == str(get_settings().sweep_cron_minute)


def test_schedule_is_replaced_not_duplicated(service):
    service.schedule()
    service.schedule()
    assert len(service.scheduler.get_jobs()) == 1


def test_start_and_stop(service):
    service.start()
    assert service.scheduler.running
    assert service.scheduler.get_job(JOB_ID) is not None

    service.stop(wait=False)
    assert not service.scheduler.running
    assert service._stop.is_set()


def test_scheduled_job_runs_the_sweep(service, register, clock):
    register("alice")
    clock.now = clock.now + timedelta(days=4)
    job = service.schedule()

    report = job.func(**job.kwargs)

    assert report.removed == ["alice"]
