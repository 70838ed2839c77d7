import json
from datetime import datetime

from boundaries import compute_boundaries
from render import format_json_report, format_report

SAMPLE_REPORT = """\
Start of day: 2024-03-15 00:00:00.000
End of day: 2024-03-15 23:59:59.999
Start of week: 2024-03-11 14:30:45.000
End of week: 2024-03-17 14:30:45.000
Start of month: 2024-03-01 00:00:00.000
End of month: 2024-03-31 23:59:59.999
Start of year: 2024-01-01 00:00:00.000
End of year: 2024-12-31 23:59:59.999"""


def test_text_report_matches_sample_output() -> None:
    result = compute_boundaries(datetime(2024, 3, 15, 14, 30, 45))
    assert format_report(result) == SAMPLE_REPORT


def test_json_report_carries_the_same_instants() -> None:
    reference = datetime(2023, 1, 1)
    decoded = json.loads(format_json_report(compute_boundaries(reference), reference=reference))

    assert decoded["reference"] == "2023-01-01 00:00:00.000"
    assert decoded["week"]["start"] == "2022-12-26 00:00:00.000"
    assert decoded["month"]["end"] == "2023-01-31 23:59:59.999"
    assert "zone" not in decoded
