from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pyarrow as pa
import pytest

from boundaries import compute_boundaries
from table import (
    TableError,
    boundary_schema,
    range_set_to_table,
    table_to_range_set,
    table_zone,
)


def test_table_has_one_row_per_period() -> None:
    table = range_set_to_table(compute_boundaries(datetime(2024, 3, 15, 14, 30, 45)))

    assert table.schema == boundary_schema()
    assert table_zone(table) is None
    assert table.column("period").to_pylist() == ["day", "week", "month", "year"]
    assert table.column("end").to_pylist()[2] == datetime(2024, 3, 31, 23, 59, 59, 999000)


def test_table_records_zone_of_aware_reference() -> None:
    reference = datetime(2024, 3, 15, 14, 30, 45, tzinfo=ZoneInfo("Europe/Berlin"))
    table = range_set_to_table(compute_boundaries(reference))
    assert table_zone(table) == "Europe/Berlin"
    # Columns hold the wall clock, not UTC.
    assert table.column("start").to_pylist()[1] == datetime(2024, 3, 11, 14, 30, 45)

    offset_ref = datetime(2024, 3, 15, 14, 30, tzinfo=timezone(timedelta(hours=-5)))
    offset_table = range_set_to_table(compute_boundaries(offset_ref))
    assert table_zone(offset_table) == "-05:00"


@pytest.mark.parametrize(
    "reference",
    [
        datetime(2023, 1, 1),
        datetime(2024, 3, 15, 14, 30, 45, tzinfo=ZoneInfo("Europe/Berlin")),
        datetime(2024, 2, 29, 8, 0, tzinfo=timezone(timedelta(hours=5, minutes=30))),
    ],
)
def test_table_converts_back_to_range_set(reference: datetime) -> None:
    original = compute_boundaries(reference)
    restored = table_to_range_set(range_set_to_table(original))

    assert restored == original
    assert restored.week.start.hour == original.week.start.hour


def test_week_end_in_dst_gap_keeps_its_wall_clock() -> None:
    # 02:30 on 2024-03-10 does not exist in New York; the week rule still lands there.
    reference = datetime(2024, 3, 9, 2, 30, tzinfo=ZoneInfo("America/New_York"))
    original = compute_boundaries(reference)
    restored = table_to_range_set(range_set_to_table(original))

    assert original.week.end.replace(tzinfo=None) == datetime(2024, 3, 10, 2, 30)
    assert restored.week.end.replace(tzinfo=None) == datetime(2024, 3, 10, 2, 30)
    assert restored.week.end.tzinfo == ZoneInfo("America/New_York")
    assert restored == original


def test_table_to_range_set_rejects_wrong_shape() -> None:
    table = range_set_to_table(compute_boundaries(datetime(2024, 3, 15)))

    with pytest.raises(TableError):
        table_to_range_set(table.slice(0, 2))
    with pytest.raises(TableError):
        table_to_range_set(table.rename_columns(["kind", "start", "end"]))
    with pytest.raises(TableError):
        table_to_range_set(table.cast(pa.schema(
            [("period", pa.string()), ("start", pa.timestamp("us")), ("end", pa.timestamp("us"))]
        )))


def test_table_to_range_set_rejects_unknown_zone() -> None:
    table = range_set_to_table(compute_boundaries(datetime(2024, 3, 15)))
    tagged = table.replace_schema_metadata({b"zone": b"Nowhere/Special"})

    with pytest.raises(TableError):
        table_to_range_set(tagged)
