"""Shared dependencies: structured logger and the request clock."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from typing import Any

from fastapi import Request

# Attributes present on every LogRecord; anything else came in via `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, merging any `extra=` fields."""
        data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                data[key] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str, ensure_ascii=False)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure and return the application logger."""
    logger = logging.getLogger("voice_inbox")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger


logger = setup_logging()


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class Clock:
    """Source of the current time for a request.

    Attributes:
        tz: Zone used for note dates and filenames (None means server local time)
        source: Callable returning an aware "now"; swapped out in tests
    """

    tz: tzinfo | None = None
    source: Callable[[], datetime] = field(default=_utc_now)

    def now(self) -> datetime:
        """Current time in the configured zone."""
        return self.source().astimezone(self.tz)

    def utc_now(self) -> datetime:
        """Current instant in UTC."""
        return self.source().astimezone(UTC)


def get_clock(request: Request) -> Clock:
    """FastAPI dependency provider for the Clock."""
    return Clock(tz=request.app.state.settings.tzinfo)
