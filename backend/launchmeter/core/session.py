from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from launchmeter.core.config import settings
from launchmeter.services.measurement import MeasurementEngine


class EngineSession:
    """The process-wide measurement engine plus the lock that serialises access to it."""

    def __init__(self, engine: MeasurementEngine) -> None:
        self.engine = engine
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[MeasurementEngine]:
        with self._lock:
            yield self.engine


_session: EngineSession | None = None
_session_lock = threading.Lock()


def get_session() -> EngineSession:
    global _session
    with _session_lock:
        if _session is None:
            _session = EngineSession(MeasurementEngine(settings.engine_config()))
        return _session
