#!/usr/bin/env python3
"""PyArrow tabular view of computed boundaries.

One row per period with millisecond timestamps. Tables stay in memory and
are a library view only; the CLI prints text or JSON. Timestamps are stored
as the boundaries' wall clock in naive columns, with the zone recorded in the
schema metadata, so week boundaries that fall in a DST gap come back
unchanged.
"""
from __future__ import annotations

from datetime import datetime, tzinfo
from typing import List, Optional

import pyarrow as pa

from boundaries import PERIODS, Boundary, RangeSet
from models import ValidationError
from time_utils import get_timezone

ZONE_METADATA_KEY = b"zone"


class TableError(Exception):
    pass


def boundary_schema(zone: Optional[str] = None) -> pa.Schema:
    schema = pa.schema(
        [
            ("period", pa.string()),
            ("start", pa.timestamp("ms")),
            ("end", pa.timestamp("ms")),
        ]
    )
    if zone is None:
        return schema
    return schema.with_metadata({ZONE_METADATA_KEY: zone.encode("utf-8")})


def _zone_name(value: datetime) -> Optional[str]:
    tz = value.tzinfo
    if tz is None:
        return None
    key = getattr(tz, "key", None)
    if isinstance(key, str):
        return key
    offset = value.utcoffset()
    if offset is None:
        return None
    minutes = int(offset.total_seconds() // 60)
    sign = "-" if minutes < 0 else "+"
    minutes = abs(minutes)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def table_zone(table: pa.Table) -> Optional[str]:
    metadata = table.schema.metadata or {}
    raw = metadata.get(ZONE_METADATA_KEY)
    if raw is None:
        return None
    return raw.decode("utf-8")


def range_set_to_table(range_set: RangeSet) -> pa.Table:
    periods: List[str] = []
    starts: List[datetime] = []
    ends: List[datetime] = []
    for period, boundary in range_set.items():
        periods.append(period)
        # Wall clock only; the zone goes into the schema metadata.
        starts.append(boundary.start.replace(tzinfo=None))
        ends.append(boundary.end.replace(tzinfo=None))
    return pa.Table.from_pydict(
        {"period": periods, "start": starts, "end": ends},
        schema=boundary_schema(_zone_name(range_set.day.start)),
    )


def table_to_range_set(table: pa.Table) -> RangeSet:
    # Validate schema shape explicitly
    names = table.schema.names
    if names != ["period", "start", "end"]:
        raise TableError(f"Unexpected boundary columns: {names}")
    for column in ("start", "end"):
        column_type = table.schema.field(column).type
        if not pa.types.is_timestamp(column_type) or column_type.unit != "ms":
            raise TableError("Boundary timestamps must have millisecond unit")
        if column_type.tz is not None:
            raise TableError("Boundary timestamps must hold wall-clock values")
    if table.num_rows != len(PERIODS):
        raise TableError(f"Expected {len(PERIODS)} rows, got {table.num_rows}")

    zone: Optional[tzinfo] = None
    zone_name = table_zone(table)
    if zone_name is not None:
        try:
            zone = get_timezone(zone_name)
        except ValidationError as exc:
            raise TableError(str(exc)) from exc

    periods = table.column("period").to_pylist()
    starts = table.column("start").to_pylist()
    ends = table.column("end").to_pylist()
    if list(periods) != list(PERIODS):
        raise TableError(f"Unexpected period order: {periods}")

    bounds = {
        period: Boundary(start.replace(tzinfo=zone), end.replace(tzinfo=zone))
        for period, start, end in zip(periods, starts, ends)
    }
    return RangeSet(**bounds)


__all__ = [
    "TableError",
    "ZONE_METADATA_KEY",
    "boundary_schema",
    "table_zone",
    "range_set_to_table",
    "table_to_range_set",
]
