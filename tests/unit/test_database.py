"""Unit tests for repokit/infrastructure/database.py.

Tests cover Settings defaults, env var override, the page-size default
used by PageRequest, and object types.
No database connection is required.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from repokit import config
from repokit.domain.models.paging import PageRequest
from repokit.infrastructure.database import AsyncSessionLocal, Base, Settings, engine


def test_settings_default_url_uses_asyncpg(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "postgresql+asyncpg" in Settings(_env_file=None).database_url


def test_settings_default_url_targets_localhost(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "localhost" in Settings(_env_file=None).database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_echo_defaults_off(monkeypatch):
    monkeypatch.delenv("DATABASE_ECHO", raising=False)
    assert Settings(_env_file=None).database_echo is False


def test_settings_reads_echo_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_ECHO", "true")
    assert Settings().database_echo is True


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_async():
    assert isinstance(engine, AsyncEngine)


def test_session_factory_produces_async_sessions():
    assert isinstance(AsyncSessionLocal, async_sessionmaker)
    assert AsyncSessionLocal.class_ is AsyncSession


def test_settings_default_page_size(monkeypatch):
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
    assert Settings(_env_file=None).default_page_size == 20


def test_settings_reads_default_page_size_from_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "50")
    assert Settings().default_page_size == 50


def test_settings_rejects_zero_page_size(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_page_request_size_defaults_to_setting(monkeypatch):
    monkeypatch.setattr(config, "settings", Settings(_env_file=None, default_page_size=7))
    assert PageRequest().size == 7
    assert PageRequest.of(2).size == 7
    assert PageRequest.of(2, 3).size == 3
