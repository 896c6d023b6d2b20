"""Environment configuration using Pydantic Settings."""

import logging
from functools import lru_cache
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file early to ensure environment variables are set
load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Read once at startup and handed to the app factory; nothing mutates
    it afterwards.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    timezone: str | None = None

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, v: Any) -> int:
        """Fall back to the default port when the value is unusable."""
        try:
            port = int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 < port < 65536:
            return DEFAULT_PORT
        return port

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Canonicalize the level name (WARN -> WARNING); unknown names become INFO."""
        number = logging.getLevelName(str(v or "").strip().upper())
        if not isinstance(number, int):
            return DEFAULT_LOG_LEVEL
        level = logging.getLevelName(number)
        return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL

    @field_validator("timezone", mode="before")
    @classmethod
    def check_timezone(cls, v: Any) -> str | None:
        """Reject unknown IANA zone names at startup rather than per request."""
        if v is None or not str(v).strip():
            return None
        name = str(v).strip()
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {name}") from e
        return name

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Configured zone, or None for server local time."""
        return ZoneInfo(self.timezone) if self.timezone else None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
