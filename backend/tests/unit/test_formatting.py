from launchmeter.models.snapshot import Snapshot, SplitEntry
from launchmeter.services.formatting import (
    EM_DASH,
    format_fix_info,
    mps_to_kmh,
    readout,
    split_label,
    split_rows,
    split_value,
)


def test_mps_to_kmh():
    assert mps_to_kmh(10.0) == 36.0
    assert mps_to_kmh(None) == 0.0
    assert mps_to_kmh(-1.0) == 0.0


def test_split_label_and_value():
    assert split_label(40.0) == "0 → 40 km/h"
    assert split_label(62.5) == "0 → 62.5 km/h"
    assert split_value(None) == EM_DASH
    assert split_value(4321) == "4.32 s"
    assert split_value(0) == "0.00 s"


def test_split_rows_follow_table_order():
    rows = split_rows((SplitEntry(40.0, 2500), SplitEntry(60.0)))
    assert [(r.label, r.value) for r in rows] == [("0 → 40 km/h", "2.50 s"), ("0 → 60 km/h", "—")]
    assert rows[1].elapsed_ms is None


def test_fix_info():
    assert format_fix_info(None, None) is None
    assert format_fix_info(12.4, 9) == "~12 m · sats: 9"
    assert format_fix_info(3.0, None) == "~3 m · sats: —"


def test_readout_of_snapshot():
    snapshot = Snapshot(
        current_kmh=42.04,
        max_kmh=97.26,
        avg_kmh=36.0,
        distance_m=1234.0,
        elapsed_ms=6520,
        fix_accuracy_m=5.0,
        satellites_used=10,
    )
    assert readout(snapshot) == {
        "current": "42.0 km/h",
        "max": "97.3 km/h",
        "avg": "36.0 km/h",
        "distance": "1.234 km",
        "elapsed": "6.52 s",
        "fix": "~5 m · sats: 10",
    }
