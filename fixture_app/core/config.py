import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from uvicorn.config import LOG_LEVELS

from fixture_app.core.logging import DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """Central application configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_title: str = "Test App"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, value: str | int | None) -> int:
        if value is None or value == "":
            return DEFAULT_PORT
        try:
            port = int(value)
        except (TypeError, ValueError):
            logger.warning("Invalid PORT %r, using %d", value, DEFAULT_PORT)
            return DEFAULT_PORT
        if not 0 < port < 65536:
            logger.warning("PORT %d out of range, using %d", port, DEFAULT_PORT)
            return DEFAULT_PORT
        return port

    @field_validator("log_level", mode="before")
    @classmethod
    def fallback_log_level(cls, value: str | None) -> str:
        level = str(value or "").strip().lower()
        if not level:
            return DEFAULT_LOG_LEVEL
        if level not in LOG_LEVELS:
            logger.warning("Invalid LOG_LEVEL %r, using %s", value, DEFAULT_LOG_LEVEL)
            return DEFAULT_LOG_LEVEL
        return level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
