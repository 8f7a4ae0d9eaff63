from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from launchmeter.models.location_sample import LocationSample
from launchmeter.models.snapshot import Snapshot


class LocationSampleIn(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    timestamp_ms: int
    speed_mps: float | None = None
    accuracy_m: float | None = Field(default=None, ge=0.0)
    satellites_used: int | None = Field(default=None, ge=0)

    def to_sample(self) -> LocationSample:
        return LocationSample(
            latitude=self.latitude,
            longitude=self.longitude,
            timestamp_ms=self.timestamp_ms,
            speed_mps=self.speed_mps,
            accuracy_m=self.accuracy_m,
            satellites_used=self.satellites_used,
        )


class ReplayIn(BaseModel):
    samples: list[LocationSampleIn] = Field(min_length=1)


class SplitOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    target_kmh: float
    elapsed_ms: int | None


class SnapshotOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    phase: str
    current_kmh: float
    max_kmh: float
    avg_kmh: float
    distance_m: float
    run_distance_m: float
    elapsed_ms: int
    t0_ms: int | None
    timestamp_ms: int | None
    fix_accuracy_m: float | None
    satellites_used: int | None
    splits: list[SplitOut]

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> SnapshotOut:
        return cls.model_validate(snapshot)


class ReplayOut(BaseModel):
    accepted: int
    ignored: int
    snapshot: SnapshotOut


class SplitRowOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    target_kmh: float
    label: str
    value: str
    elapsed_ms: int | None


class ReadoutOut(BaseModel):
    phase: str
    current: str
    max: str
    avg: str
    distance: str
    elapsed: str
    fix: str | None


class EngineConfigOut(BaseModel):
    alpha: float
    stop_kmh: float
    moving_kmh: float
    thresholds_kmh: list[float]
