"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The cache backend is validated at load time.
"""

import logging
from functools import lru_cache

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CACHE_BACKENDS = ("memory", "redis")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; cache_backend is checked in
    validate_cache_backend.
    """

    # App
    app_name: str = "together-pray"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str | None = None  # None = DEBUG when debug else INFO
    cache_log_level: str | None = None  # None = inherit log_level

    # Cache: "memory" (in-process) or "redis"
    cache_backend: str = "memory"
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_socket_timeout: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", "cache_log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalize to upper case and reject names logging does not know."""
        if v is None or v == "":
            return None
        name = str(v).strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return name

    @model_validator(mode="after")
    def validate_cache_backend(self) -> "Settings":
        """Reject unknown cache backends."""
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"cache_backend must be one of {CACHE_BACKENDS}, got: {self.cache_backend!r}"
            )
        return self


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
