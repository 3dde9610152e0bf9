"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: timestamp, level, logger, message. Request fields are added
contextually (method, path, status_code, duration_ms for API calls; offset,
page_items for pagination).

SECURITY: Never logs API tokens or Authorization header values.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone


# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(api.token|token|secret|password|authorization)"
    r"[\s]*[=:]\s*(bearer\s+)?\S+",
    re.IGNORECASE,
)
_BEARER_PATTERN = re.compile(r"bearer\s+\S+", re.IGNORECASE)

_EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms", "offset", "page_items")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: timestamp, level, logger, message.
    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        text = _SENSITIVE_PATTERNS.sub("[REDACTED]", text)
        return _BEARER_PATTERN.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO") -> None:
    """Configure the ``pyslide`` logger with JSON formatting.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    logger = logging.getLogger("pyslide")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
