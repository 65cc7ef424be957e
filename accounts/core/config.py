"""
Configuration helpers for the account services.

Services and repositories read settings through ``get_settings()`` so that
nothing else fetches ``os.environ`` directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


# width of users.activation_key
ACTIVATION_KEY_MAX_LENGTH = 20


def clamp_key_length(length: int) -> int:
    """Keep activation keys between 1 character and the column width."""
    return max(1, min(length, ACTIVATION_KEY_MAX_LENGTH))


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    activation_retention_days: int
    activation_key_length: int
    sweep_cron_hour: int
    sweep_cron_minute: int
    sweep_timezone: str
    default_authorities: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip() for item in (value or "").split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./accounts.db"),
        activation_retention_days=_int(os.getenv("ACTIVATION_RETENTION_DAYS", "3"), 3),
        activation_key_length=clamp_key_length(_int(os.getenv("ACTIVATION_KEY_LENGTH", "20"), 20)),
        sweep_cron_hour=_int(os.getenv("SWEEP_CRON_HOUR", "1"), 1),
        sweep_cron_minute=_int(os.getenv("SWEEP_CRON_MINUTE", "0"), 0),
        sweep_timezone=os.getenv("SWEEP_TIMEZONE", "UTC"),
        default_authorities=_csv(os.getenv("DEFAULT_AUTHORITIES", "ROLE_USER,ROLE_ADMIN")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
