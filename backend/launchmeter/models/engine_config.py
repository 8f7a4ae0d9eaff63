from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_SPEED_THRESHOLDS_KMH: Final[tuple[float, ...]] = (40, 60, 80, 100, 120, 140, 160, 180, 200)
DEFAULT_SMOOTHING_ALPHA: Final[float] = 0.25
DEFAULT_STOP_KMH: Final[float] = 1.0
DEFAULT_MOVING_KMH: Final[float] = 3.0


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Static tuning of one measurement session.

    Attributes:
        alpha: Smoothing coefficient for the speed filter. Out-of-range values
            are clamped by the filter, not rejected here.
        stop_kmh: At or below this smoothed speed an armed vehicle still reads
            as parked.
        moving_kmh: At or above this smoothed speed an armed run launches.
        thresholds_kmh: Strictly increasing split targets.
    """

    alpha: float = DEFAULT_SMOOTHING_ALPHA
    stop_kmh: float = DEFAULT_STOP_KMH
    moving_kmh: float = DEFAULT_MOVING_KMH
    thresholds_kmh: tuple[float, ...] = DEFAULT_SPEED_THRESHOLDS_KMH

    def __post_init__(self) -> None:
        thresholds = tuple(float(t) for t in self.thresholds_kmh)
        if not thresholds:
            raise ValueError("thresholds_kmh must not be empty")
        if thresholds[0] <= 0:
            raise ValueError("thresholds_kmh must be positive")
        if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("thresholds_kmh must be strictly increasing")
        if self.stop_kmh < 0:
            raise ValueError("stop_kmh must not be negative")
        if self.stop_kmh >= self.moving_kmh:
            raise ValueError("stop_kmh must be lower than moving_kmh")
        object.__setattr__(self, "thresholds_kmh", thresholds)
