"""Unit tests for settings."""

import pytest

from roleguard.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("USERS_TABLE", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.users_table == "users"
    assert settings.database_url.endswith("/roleguard")
    assert settings.environment == "development"
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USERS_TABLE", "accounts")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "3")
    monkeypatch.setenv("debug", "true")
    settings = Settings(_env_file=None)
    assert settings.users_table == "accounts"
    assert settings.db_pool_max_size == 3
    assert settings.debug is True
