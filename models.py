#!/usr/bin/env python3
"""Instant parsing, rendering and validation helpers for tbounds."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from boundaries import RangeSet, truncate_to_millisecond

DATETIME_FMT = "%Y-%m-%d %H:%M:%S"


class ValidationError(Exception):
    pass


def parse_instant(value: str) -> datetime:
    """Parse a reference timestamp into a millisecond-resolution instant.

    Accepts ``YYYY-MM-DD``, ``YYYY-MM-DD HH:MM[:SS[.mmm]]`` and ISO-8601 with a
    ``T`` separator, a trailing ``Z`` or an explicit ``+HH:MM`` offset. Naive
    input stays naive; the caller decides which zone it belongs to.
    """
    value = value.strip()
    if not value:
        raise ValidationError("Reference timestamp is empty")

    iso_candidate = value.replace("T", " ")
    utc = iso_candidate.endswith("Z")
    if utc:
        iso_candidate = iso_candidate[:-1]
    try:
        parsed = datetime.fromisoformat(iso_candidate)
    except ValueError:
        parsed = None

    if parsed is None:
        # Accept YYYY-MM-DD HH:MM and normalize seconds
        try:
            if len(value) == 16 and "T" not in value:
                parsed = datetime.strptime(f"{value}:00", DATETIME_FMT)
            else:
                parsed = datetime.strptime(value, DATETIME_FMT)
        except ValueError as exc:
            raise ValidationError(
                f"Invalid timestamp format: '{value}'. "
                "Expected YYYY-MM-DD[ HH:MM[:SS[.mmm]]]"
            ) from exc

    if utc:
        if parsed.tzinfo is not None:
            raise ValidationError(f"Timestamp '{value}' has both 'Z' and an offset")
        parsed = parsed.replace(tzinfo=timezone.utc)
    return truncate_to_millisecond(parsed)


def format_instant(value: datetime) -> str:
    """Render an instant as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    # strftime leaves years below 1000 unpadded on some platforms.
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}."
        f"{value.microsecond // 1000:03d}"
    )


def zone_label(value: datetime) -> str | None:
    if value.tzinfo is None:
        return None
    key = getattr(value.tzinfo, "key", None)
    if isinstance(key, str):
        return key
    return value.tzname()


def range_set_to_jsonable(range_set: RangeSet, *, reference: datetime) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"reference": format_instant(reference)}
    zone = zone_label(reference)
    if zone is not None:
        payload["zone"] = zone
    for period, boundary in range_set.items():
        payload[period] = {
            "start": format_instant(boundary.start),
            "end": format_instant(boundary.end),
        }
    return payload


__all__ = [
    "ValidationError",
    "truncate_to_millisecond",
    "parse_instant",
    "format_instant",
    "zone_label",
    "range_set_to_jsonable",
    "DATETIME_FMT",
]
