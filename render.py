"""Text and JSON reports for computed boundaries."""

from __future__ import annotations

import json
from datetime import datetime
from typing import List

from boundaries import RangeSet
from models import format_instant, range_set_to_jsonable

OUTPUT_FORMATS = ("text", "json")


def format_boundary_lines(range_set: RangeSet) -> List[str]:
    """Render each period as a ``Start of ...`` line followed by ``End of ...``."""

    lines: List[str] = []
    for period, boundary in range_set.items():
        lines.append(f"Start of {period}: {format_instant(boundary.start)}")
        lines.append(f"End of {period}: {format_instant(boundary.end)}")
    return lines


def format_report(range_set: RangeSet) -> str:
    return "\n".join(format_boundary_lines(range_set))


def format_json_report(range_set: RangeSet, *, reference: datetime) -> str:
    return json.dumps(range_set_to_jsonable(range_set, reference=reference), indent=2)


__all__ = [
    "OUTPUT_FORMATS",
    "format_boundary_lines",
    "format_report",
    "format_json_report",
]
