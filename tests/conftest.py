from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from argon2 import PasswordHasher

# Make the accounts package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from accounts.core import config as core_config  # noqa: E402
from accounts.core.security import CredentialHasher  # noqa: E402
from accounts.db import models  # noqa: E402
from accounts.db import session as db_session  # noqa: E402
from accounts.db.create_tables import create_all  # noqa: E402


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Temporary SQLite database with the authority catalog seeded; resets settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("DEFAULT_AUTHORITIES", "ROLE_USER,ROLE_ADMIN")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    create_all()

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def hasher():
    """Argon2 with minimal cost parameters so the suite stays fast."""
    return CredentialHasher(PasswordHasher(time_cost=1, memory_cost=8, parallelism=1))


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock():
    return FrozenClock(datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture()
def registration(db_env, hasher, clock):
    from accounts.services.registration_service import RegistrationService

    return RegistrationService(hasher=hasher, clock=clock)


@pytest.fixture()
def register(registration):
    """Register a pending account with sensible defaults."""

    def _register(login: str = "alice", password: str = "secret-pass", role_ids=("ROLE_USER",), **kwargs):
        return registration.register(login, kwargs.pop("user_no", "U-1"), password, role_ids=list(role_ids), **kwargs)

    return _register
