"""Settings — database URL rewriting and defaults."""

import pytest

from dashboard.config import Settings


@pytest.mark.parametrize("url", [
    "postgres://u:p@host:5432/db",
    "postgresql://u:p@host:5432/db",
])
def test_postgres_urls_use_asyncpg(url):
    settings = Settings(database_url=url)
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_drivers_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_postgres_url_env_alias(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("POSTGRES_URL", "postgresql://u:p@host/db")
    assert Settings().database_url == "postgresql+asyncpg://u:p@host/db"


def test_best_effort_persistence_is_default(monkeypatch):
    monkeypatch.delenv("PERSISTENCE_BEST_EFFORT", raising=False)
    assert Settings().persistence_best_effort is True
