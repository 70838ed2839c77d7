#!/usr/bin/env python3
"""Orchestrator for tbounds."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from boundaries import compute_boundaries
from config import DEFAULT_LOG_LEVEL, Config, load_config
from logging_setup import configure_logging
from models import parse_instant, zone_label
from render import format_json_report, format_report
from time_utils import attach_timezone, get_timezone, now_in_timezone

logger = logging.getLogger("tbounds.orchestrator")


class Orchestrator:
    """Owns config, logging and the reference-to-report flow."""

    def __init__(self, config: Optional[Config] = None, *, config_path: Optional[Path] = None) -> None:
        # Default handler first so config fallback warnings are JSON lines too.
        configure_logging(level=DEFAULT_LOG_LEVEL)
        self.config = config if config is not None else load_config(config_path)
        configure_logging(level=self.config.log_level)

    def resolve_reference(self, raw: Optional[str], *, zone: Optional[str] = None) -> datetime:
        """Parse ``raw`` or read the clock, pinned to ``zone`` or the configured one."""

        tz_name = zone or self.config.timezone
        if tz_name is not None:
            # Surface unknown zones before touching the clock or the input.
            get_timezone(tz_name)

        if raw is None:
            reference = now_in_timezone(tz_name)
        else:
            reference = attach_timezone(parse_instant(raw), tz_name)

        logger.debug(
            "Resolved reference",
            extra={"reference": reference.isoformat(), "zone": zone_label(reference)},
        )
        return reference

    def report(
        self,
        raw_reference: Optional[str] = None,
        *,
        zone: Optional[str] = None,
        output: Optional[str] = None,
    ) -> str:
        reference = self.resolve_reference(raw_reference, zone=zone)
        range_set = compute_boundaries(reference)
        if (output or self.config.output) == "json":
            return format_json_report(range_set, reference=reference)
        return format_report(range_set)

    def run(
        self,
        raw_reference: Optional[str] = None,
        *,
        zone: Optional[str] = None,
        output: Optional[str] = None,
        out: Optional[TextIO] = None,
    ) -> int:
        print(self.report(raw_reference, zone=zone, output=output), file=out)
        return 0


__all__ = ["Orchestrator"]
