"""Zone resolution and clock helpers.

The reference instant always carries its zone explicitly. Nothing here reads
the process-local zone: callers either name a zone (IANA key or a fixed
``+HH:MM`` offset) or get a naive clock reading back.
"""
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from boundaries import truncate_to_millisecond
from models import ValidationError

_OFFSET_RE = re.compile(r"^(?:UTC)?([+-])(\d{2}):?(\d{2})$")


def get_timezone(tz_name: str) -> tzinfo:
    """Return a tzinfo for an IANA key (``Europe/Paris``) or an offset (``+05:30``)."""

    name = tz_name.strip()
    if not name:
        raise ValidationError("Zone name is empty")
    if name.upper() in {"UTC", "Z"}:
        return timezone.utc

    match = _OFFSET_RE.match(name)
    if match:
        sign, hours, minutes = match.groups()
        delta = timedelta(hours=int(hours), minutes=int(minutes))
        if delta >= timedelta(hours=24):
            raise ValidationError(f"Offset out of range: '{name}'")
        return timezone(-delta if sign == "-" else delta)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValidationError(f"Unknown zone: '{name}'") from exc


def now_in_timezone(tz_name: str | None = None) -> datetime:
    """Return the current instant in ``tz_name``, naive when no zone is given."""

    if tz_name is None:
        return truncate_to_millisecond(datetime.now())
    return truncate_to_millisecond(datetime.now(get_timezone(tz_name)))


def attach_timezone(value: datetime, tz_name: str | None) -> datetime:
    """Attach ``tz_name`` to a naive instant without shifting its wall clock.

    Aware instants are returned unchanged.
    """

    if tz_name is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=get_timezone(tz_name))


__all__ = ["get_timezone", "now_in_timezone", "attach_timezone"]
