from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping


class InvalidSampleError(ValueError):
    """Raised when a location fix cannot be turned into a LocationSample."""


def _require_finite(name: str, value: Any) -> float:
    if value is None:
        raise InvalidSampleError(f"{name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidSampleError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidSampleError(f"{name} must be finite, got {value!r}")
    return number


def _optional_finite(name: str, value: Any) -> float | None:
    if value is None:
        return None
    return _require_finite(name, value)


def _require_timestamp(value: Any) -> int:
    if value is None or isinstance(value, bool):
        raise InvalidSampleError("timestamp_ms is required")
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidSampleError(f"timestamp_ms must be an integer, got {value!r}") from exc
    if not math.isfinite(number) or not number.is_integer():
        raise InvalidSampleError(f"timestamp_ms must be an integer, got {value!r}")
    return int(number)


@dataclass(frozen=True, slots=True)
class LocationSample:
    """A single geolocation fix pushed into the engine.

    Attributes:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        timestamp_ms: Unix epoch milliseconds of the fix.
        speed_mps: Instantaneous speed reported by the receiver, if any.
        accuracy_m: Horizontal accuracy radius in meters, if reported.
        satellites_used: Satellites used for the fix, if reported.
    """

    latitude: float
    longitude: float
    timestamp_ms: int
    speed_mps: float | None = None
    accuracy_m: float | None = None
    satellites_used: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", _require_finite("latitude", self.latitude))
        object.__setattr__(self, "longitude", _require_finite("longitude", self.longitude))
        object.__setattr__(self, "timestamp_ms", _require_timestamp(self.timestamp_ms))
        # Negative speeds pass through: receivers use -1 for "unknown".
        object.__setattr__(self, "speed_mps", _optional_finite("speed_mps", self.speed_mps))
        object.__setattr__(self, "accuracy_m", _optional_finite("accuracy_m", self.accuracy_m))
        if self.satellites_used is not None and (
            isinstance(self.satellites_used, bool) or not isinstance(self.satellites_used, int)
        ):
            raise InvalidSampleError(
                f"satellites_used must be an integer, got {self.satellites_used!r}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LocationSample:
        """Build a sample from a JSON-like mapping (missing optional keys are None)."""

        return cls(
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            timestamp_ms=data.get("timestamp_ms"),
            speed_mps=data.get("speed_mps"),
            accuracy_m=data.get("accuracy_m"),
            satellites_used=data.get("satellites_used"),
        )
