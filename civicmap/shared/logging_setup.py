"""
Civic Map - Logging Setup

Root logger configuration driven by the ``logging`` config section. Library
modules only create named loggers; scripts call ``configure_logging`` once.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from civicmap.shared.config import Settings, get_config

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes present on every LogRecord; anything else came in through ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys() | {"message", "asctime"}
)


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Settings | None = None) -> logging.Handler:
    """
    Install a root handler using the configured level and format.

    Args:
        config: Configuration object (uses default if not provided)

    Returns:
        The installed handler
    """
    config = config or get_config()

    handler = logging.StreamHandler()
    if config.logging.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.basicConfig(level=config.logging.level, handlers=[handler], force=True)
    return handler
