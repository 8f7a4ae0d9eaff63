from __future__ import annotations

import logging
from typing import Iterable

from launchmeter.models.engine_config import EngineConfig
from launchmeter.models.location_sample import LocationSample
from launchmeter.models.snapshot import Snapshot, SplitEntry
from launchmeter.services.formatting import mps_to_kmh
from launchmeter.services.geo import haversine_m
from launchmeter.services.run_state import RunPhase, RunStateMachine
from launchmeter.services.smoothing import EmaFilter
from launchmeter.services.splits import new_split_table, observe

logger = logging.getLogger(__name__)


def average_kmh(distance_m: float, elapsed_ms: int) -> float:
    if elapsed_ms <= 0:
        return 0.0
    return (distance_m / 1000.0) / (elapsed_ms / 3_600_000.0)


class MeasurementEngine:
    """Turns a stream of location fixes into speed, distance and 0->X split readouts.

    The engine is synchronous and owns all of its mutable state; callers only get
    immutable Snapshot values back. One caller at a time must drive it.

    Distance policy: distance_m sums every leg since the session started,
    whatever the phase. The average speed only uses run_distance_m, the legs
    that start after launch.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self._filter = EmaFilter(self.config.alpha)
        self._state = RunStateMachine(
            stop_kmh=self.config.stop_kmh,
            moving_kmh=self.config.moving_kmh,
        )
        self._clear()

    @property
    def phase(self) -> RunPhase:
        return self._state.phase

    @property
    def thresholds(self) -> tuple[float, ...]:
        return self.config.thresholds_kmh

    @property
    def alpha(self) -> float:
        return self._filter.alpha

    @property
    def filter_value(self) -> float | None:
        return self._filter.value

    @property
    def accepted_count(self) -> int:
        return self._accepted

    @property
    def ignored_count(self) -> int:
        return self._ignored

    def snapshot(self) -> Snapshot:
        return self._snapshot

    def arm(self) -> Snapshot:
        """Start a fresh run: clear every readout and wait for a launch."""

        self._clear()
        self._state.arm()
        self._snapshot = self._build_snapshot()
        return self._snapshot

    def stop(self) -> Snapshot:
        """Leave the run; elapsed, average and splits freeze at their last values."""

        self._state.stop()
        self._snapshot = self._build_snapshot()
        return self._snapshot

    def reset(self) -> Snapshot:
        self._state.reset()
        self._clear()
        logger.info("Session reset")
        return self._snapshot

    def ingest(self, sample: LocationSample) -> Snapshot:
        now = sample.timestamp_ms
        if self._last_timestamp_ms is not None and now <= self._last_timestamp_ms:
            self._ignored += 1
            logger.debug(
                "Ignoring out-of-order sample",
                extra={"timestamp_ms": now, "last_timestamp_ms": self._last_timestamp_ms},
            )
            return self._snapshot
        self._last_timestamp_ms = now
        self._accepted += 1

        current_kmh = self._filter.next(mps_to_kmh(sample.speed_mps))
        self._current_kmh = current_kmh
        self._max_kmh = max(self._max_kmh, current_kmh)

        # A leg counts toward the run only if the run was already going when it began.
        was_running = self._state.is_running
        if self._last_coordinate is not None:
            lat, lon = self._last_coordinate
            leg_m = haversine_m(lat, lon, sample.latitude, sample.longitude)
            self._total_distance_m += leg_m
            if was_running:
                self._run_distance_m += leg_m
        self._last_coordinate = (sample.latitude, sample.longitude)

        self._state.advance(current_kmh, now)

        t0 = self._state.t0
        if t0 is not None:
            self._elapsed_ms = now - t0
            self._avg_kmh = average_kmh(self._run_distance_m, self._elapsed_ms)
            splits = observe(self._splits, t0, now, current_kmh)
            self._log_new_splits(self._splits, splits)
            self._splits = splits

        self._fix_accuracy_m = sample.accuracy_m
        self._satellites_used = sample.satellites_used
        self._snapshot = self._build_snapshot(timestamp_ms=now)
        return self._snapshot

    def replay(self, samples: Iterable[LocationSample]) -> list[Snapshot]:
        return [self.ingest(sample) for sample in samples]

    def _clear(self) -> None:
        self._filter.reset()
        self._splits = new_split_table(self.config.thresholds_kmh)
        self._total_distance_m = 0.0
        self._run_distance_m = 0.0
        self._last_coordinate: tuple[float, float] | None = None
        self._current_kmh = 0.0
        self._max_kmh = 0.0
        self._avg_kmh = 0.0
        self._elapsed_ms = 0
        self._fix_accuracy_m: float | None = None
        self._satellites_used: int | None = None
        self._last_timestamp_ms: int | None = None
        self._accepted = 0
        self._ignored = 0
        self._snapshot = self._build_snapshot()

    def _build_snapshot(self, timestamp_ms: int | None = None) -> Snapshot:
        return Snapshot(
            current_kmh=self._current_kmh,
            max_kmh=self._max_kmh,
            avg_kmh=self._avg_kmh,
            distance_m=self._total_distance_m,
            elapsed_ms=self._elapsed_ms,
            splits=self._splits,
            fix_accuracy_m=self._fix_accuracy_m,
            satellites_used=self._satellites_used,
            phase=self._state.phase.value,
            t0_ms=self._state.t0,
            timestamp_ms=timestamp_ms if timestamp_ms is not None else self._last_timestamp_ms,
            run_distance_m=self._run_distance_m,
        )

    @staticmethod
    def _log_new_splits(
        before: tuple[SplitEntry, ...],
        after: tuple[SplitEntry, ...],
    ) -> None:
        for old, new in zip(before, after):
            if old.elapsed_ms is None and new.elapsed_ms is not None:
                logger.info(
                    "Split reached",
                    extra={"target_kmh": new.target_kmh, "elapsed_ms": new.elapsed_ms},
                )
