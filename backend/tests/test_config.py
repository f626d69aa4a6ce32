"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from parking_control.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DB_CREATE_TABLES", raising=False)

    settings = Settings(_env_file=None)

    assert settings.CORS_ORIGINS == ["*"]
    assert settings.CORS_MAX_AGE == 3600
    assert settings.DB_CREATE_TABLES is True
    assert settings.async_database_url.startswith("postgresql+asyncpg://")
    assert settings.is_sqlite is False


def test_sqlite_url_left_alone(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./parking.db")

    settings = Settings(_env_file=None)

    assert settings.async_database_url == "sqlite+aiosqlite:///./parking.db"
    assert settings.is_sqlite is True


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


def test_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
