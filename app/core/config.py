"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. DATABASE_URL and the pagination limits are validated
at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_DRIVERS = ("sqlite+aiosqlite", "postgresql+asyncpg")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_database_and_paging rejects a
    blank or synchronous DATABASE_URL and inconsistent page sizes.
    """

    # App
    app_name: str = "dashboard-admin"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: SQLAlchemy async URL (aiosqlite for local/dev, asyncpg in production)
    database_url: str = "sqlite+aiosqlite:///./dashboard_admin.db"
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py; ignored for SQLite)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    # Create tables at startup instead of running Alembic (dev and tests)
    auto_create_schema: bool = True

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 1000

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database_and_paging(self) -> "Settings":
        """Validate database URL and pagination limits.

        - DATABASE_URL must be set and use an async driver.
        - default_page_size and max_page_size must be positive, default <= max.
        """
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL is required. Set in environment or .env file "
                "(e.g. sqlite+aiosqlite:///./dashboard_admin.db)."
            )
        if not self.database_url.startswith(_ASYNC_DRIVERS):
            raise ValueError(
                f"DATABASE_URL must use an async driver ({', '.join(_ASYNC_DRIVERS)}), "
                f"got: {self.database_url.split('://', 1)[0]!r}"
            )
        if self.default_page_size < 1 or self.max_page_size < 1:
            raise ValueError("default_page_size and max_page_size must be positive")
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) must not exceed "
                f"max_page_size ({self.max_page_size})"
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
