from __future__ import annotations

from accounts.core import config as core_config


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("ACTIVATION_RETENTION_DAYS", "7")
    monkeypatch.setenv("SWEEP_CRON_HOUR", "4")
    monkeypatch.setenv("DEFAULT_AUTHORITIES", "ROLE_USER, ROLE_STUDENT ,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.activation_retention_days == 7
        assert settings.sweep_cron_hour == 4
        assert settings.sweep_cron_minute == 0
        assert settings.default_authorities == ("ROLE_USER", "ROLE_STUDENT")
        assert settings.log_level == "DEBUG"
    finally:
        core_config.get_settings.cache_clear()


def test_invalid_numbers_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("ACTIVATION_RETENTION_DAYS", "three")
    monkeypatch.delenv("SWEEP_CRON_HOUR", raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.activation_retention_days == 3
        assert settings.sweep_cron_hour == 1
        assert settings.activation_key_length == 20
    finally:
        core_config.get_settings.cache_clear()


def test_activation_key_length_is_capped_at_column_width(monkeypatch):
    monkeypatch.setenv("ACTIVATION_KEY_LENGTH", "64")
    core_config.get_settings.cache_clear()
    try:
        assert core_config.get_settings().activation_key_length == core_config.ACTIVATION_KEY_MAX_LENGTH
    finally:
        core_config.get_settings.cache_clear()

    assert core_config.clamp_key_length(12) == 12
    assert core_config.clamp_key_length(-5) == 1
