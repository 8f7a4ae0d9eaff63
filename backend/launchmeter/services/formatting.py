from __future__ import annotations

from dataclasses import dataclass

from launchmeter.models.snapshot import Snapshot, SplitEntry

MPS_TO_KMH = 3.6
EM_DASH = "—"


def mps_to_kmh(speed_mps: float | None) -> float:
    """Convert m/s to km/h. Missing or negative (unknown) speeds count as 0."""

    if speed_mps is None or speed_mps < 0:
        return 0.0
    return speed_mps * MPS_TO_KMH


def split_label(target_kmh: float) -> str:
    return f"0 → {target_kmh:g} km/h"


def split_value(elapsed_ms: int | None) -> str:
    if elapsed_ms is None:
        return EM_DASH
    return f"{elapsed_ms / 1000:.2f} s"


@dataclass(frozen=True)
class SplitRow:
    target_kmh: float
    label: str
    value: str
    elapsed_ms: int | None


def split_rows(splits: tuple[SplitEntry, ...]) -> list[SplitRow]:
    return [
        SplitRow(
            target_kmh=s.target_kmh,
            label=split_label(s.target_kmh),
            value=split_value(s.elapsed_ms),
            elapsed_ms=s.elapsed_ms,
        )
        for s in splits
    ]


def format_fix_info(accuracy_m: float | None, satellites_used: int | None) -> str | None:
    """Fix-quality line, e.g. "~12 m · sats: 9". None when nothing was reported."""

    if accuracy_m is None and satellites_used is None:
        return None
    accuracy = EM_DASH if accuracy_m is None else f"{accuracy_m:.0f}"
    sats = EM_DASH if satellites_used is None else str(satellites_used)
    return f"~{accuracy} m · sats: {sats}"


def readout(snapshot: Snapshot) -> dict[str, str | None]:
    return {
        "current": f"{snapshot.current_kmh:.1f} km/h",
        "max": f"{snapshot.max_kmh:.1f} km/h",
        "avg": f"{snapshot.avg_kmh:.1f} km/h",
        "distance": f"{snapshot.distance_m / 1000:.3f} km",
        "elapsed": f"{snapshot.elapsed_ms / 1000:.2f} s",
        "fix": format_fix_info(snapshot.fix_accuracy_m, snapshot.satellites_used),
    }
