from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SplitEntry:
    """Elapsed time from launch to the first sample reaching target_kmh."""

    target_kmh: float
    elapsed_ms: int | None = None

    @property
    def is_set(self) -> bool:
        return self.elapsed_ms is not None


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Immutable readout of the engine after one ingested sample."""

    current_kmh: float = 0.0
    max_kmh: float = 0.0
    avg_kmh: float = 0.0
    distance_m: float = 0.0
    elapsed_ms: int = 0
    splits: tuple[SplitEntry, ...] = field(default_factory=tuple)
    fix_accuracy_m: float | None = None
    satellites_used: int | None = None
    phase: str = "idle"
    t0_ms: int | None = None
    timestamp_ms: int | None = None
    run_distance_m: float = 0.0

    def split_for(self, target_kmh: float) -> SplitEntry | None:
        for entry in self.splits:
            if entry.target_kmh == target_kmh:
                return entry
        return None
