#!/usr/bin/env python3
"""Configuration loading for tbounds."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from paths import config_dir
from render import OUTPUT_FORMATS

logger = logging.getLogger("tbounds.config")


@dataclass
class Config:
    timezone: Optional[str] = None
    output: str = "text"
    log_level: str = "WARNING"


CONFIG_FILENAME = "config.json"
DEFAULT_LOG_LEVEL = "WARNING"


def default_config_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def _read_raw(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        return {}
    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            "Ignoring unreadable config", extra={"path": str(config_path), "error": str(exc)}
        )
        return {}
    try:
        raw = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            raw = json.loads(_strip_trailing_commas(raw_text))
        except json.JSONDecodeError as exc:
            logger.warning(
                "Ignoring unreadable config", extra={"path": str(config_path), "error": str(exc)}
            )
            return {}
    if not isinstance(raw, dict):
        logger.warning("Config root must be an object", extra={"path": str(config_path)})
        return {}
    return raw


def load_config(path: Optional[Path] = None) -> Config:
    """Load config from the XDG path, falling back to defaults.

    Invalid JSON or a missing file yields the defaults. Unknown output
    formats fall back to plain text.
    """

    config_path = (path or default_config_path()).expanduser()
    raw = _read_raw(config_path)

    timezone = raw.get("timezone")
    if timezone is not None and not isinstance(timezone, str):
        logger.warning("Ignoring non-string timezone", extra={"value": repr(timezone)})
        timezone = None

    output = raw.get("output") or "text"
    if output not in OUTPUT_FORMATS:
        logger.warning("Unknown output format, using text", extra={"value": repr(output)})
        output = "text"

    log_level = raw.get("log_level") or DEFAULT_LOG_LEVEL
    if not isinstance(log_level, str) or log_level.upper() not in logging.getLevelNamesMapping():
        logger.warning("Unknown log level", extra={"value": repr(log_level)})
        log_level = DEFAULT_LOG_LEVEL

    return Config(
        timezone=timezone or None,
        output=output,
        log_level=log_level.upper(),
    )


def _strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing braces/brackets."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["Config", "load_config", "default_config_path", "CONFIG_FILENAME", "DEFAULT_LOG_LEVEL"]
