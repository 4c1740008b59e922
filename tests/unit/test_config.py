"""Settings loading and DATABASE_URL normalization."""

import pytest
from pydantic import ValidationError

from users_service.core.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.database_url == "postgresql+asyncpg://localhost/users_development"
    assert settings.request_id_header == "X-Request-ID"


@pytest.mark.parametrize(
    "raw",
    [
        "postgres://u:p@db:5432/users",
        "postgresql://u:p@db:5432/users",
        "postgresql+asyncpg://u:p@db:5432/users",
    ],
)
def test_database_url_uses_asyncpg_driver(raw: str) -> None:
    settings = Settings(_env_file=None, database_url=raw)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/users"


def test_database_url_rejects_other_backends() -> None:
    with pytest.raises(ValidationError, match="PostgreSQL"):
        Settings(_env_file=None, database_url="sqlite:///users.db")


def test_database_url_required() -> None:
    with pytest.raises(ValidationError, match="DATABASE_URL is required"):
        Settings(_env_file=None, database_url="  ")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DATABASE_URL", "postgres://localhost/other")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.port == 8080
        assert settings.database_url == "postgresql+asyncpg://localhost/other"
    finally:
        get_settings.cache_clear()


@pytest.mark.parametrize(("raw", "expected"), [("debug", "DEBUG"), (" Warning ", "WARNING"), ("", None)])
def test_log_level_normalized(raw: str, expected: str | None) -> None:
    assert Settings(_env_file=None, log_level=raw).log_level == expected


def test_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
        Settings(_env_file=None, log_level="verbose")
