"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded in deployments)
    - get_settings() is cached (lru_cache) — single instance per process
    - PostgreSQL connections require TLS unless database_ssl is emptied explicitly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DATABASE_URL and POSTGRES_URL both accepted: hosted Postgres providers export either
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = Field(
        "postgresql+asyncpg://dashboard:dashboard@db:5432/dashboard",
        validation_alias=AliasChoices("database_url", "postgres_url"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Providers hand out postgres:// or postgresql://; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_ssl: str = "require"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Sessions
    session_secret_key: str = "dev-secret-change-me"
    session_https_only: bool = True
    session_max_age_seconds: int = 60 * 60 * 24

    # Invoice actions
    # ADR: best-effort keeps the always-redirect UX; False surfaces write failures
    persistence_best_effort: bool = True
    invoices_path: str = "/dashboard/invoices"
    sign_in_redirect_path: str = "/dashboard"
    sign_out_redirect_path: str = "/login"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
