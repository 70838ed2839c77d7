"""Centralized logging configuration for tbounds."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging import Logger
from typing import IO, Any, Dict, Optional

LOGGER_NAME = "tbounds"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Serialize LogRecord fields as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED or key in payload:
                continue
            try:
                json.dumps({key: value})
            except TypeError:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    level: str = "WARNING",
    stream: Optional[IO[str]] = None,
    logger_name: str = LOGGER_NAME,
) -> Logger:
    """Configure the tbounds logger with a JSON handler on stderr."""

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter())

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    logger.debug("JSON logging configured", extra={"configured_level": level.upper()})
    return logger


__all__ = ["configure_logging", "JsonFormatter", "LOGGER_NAME"]
