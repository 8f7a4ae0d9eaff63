from launchmeter.models.engine_config import EngineConfig
from launchmeter.models.location_sample import InvalidSampleError, LocationSample
from launchmeter.models.snapshot import Snapshot, SplitEntry

__all__ = [
    "EngineConfig",
    "InvalidSampleError",
    "LocationSample",
    "Snapshot",
    "SplitEntry",
]
