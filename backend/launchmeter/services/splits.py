from __future__ import annotations

from typing import Iterable

from launchmeter.models.snapshot import SplitEntry


def new_split_table(thresholds_kmh: Iterable[float]) -> tuple[SplitEntry, ...]:
    return tuple(SplitEntry(target_kmh=float(t)) for t in thresholds_kmh)


def observe(
    splits: tuple[SplitEntry, ...],
    t0: int | None,
    now: int,
    smoothed_kmh: float,
) -> tuple[SplitEntry, ...]:
    """Record now - t0 on every unset split whose target the speed has reached.

    Entries already set are write-once and pass through untouched. Without a time
    origin the table is returned as is.
    """

    if t0 is None:
        return splits

    elapsed_ms = now - t0
    return tuple(
        SplitEntry(target_kmh=s.target_kmh, elapsed_ms=elapsed_ms)
        if s.elapsed_ms is None and smoothed_kmh >= s.target_kmh
        else s
        for s in splits
    )
