from __future__ import annotations

import logging
from enum import Enum

from launchmeter.models.engine_config import DEFAULT_MOVING_KMH, DEFAULT_STOP_KMH

logger = logging.getLogger(__name__)


class RunPhase(str, Enum):
    IDLE = "idle"
    ARMED = "armed"
    RUNNING = "running"


class RunStateMachine:
    """Arm/launch/stop transitions and the run's time origin (t0).

    While armed, a launch needs the smoothed speed to reach moving_kmh. Speeds at
    or below stop_kmh read as parked, and the band between the two thresholds is
    a dead zone, so GPS jitter around zero never starts the clock.
    """

    def __init__(
        self,
        stop_kmh: float = DEFAULT_STOP_KMH,
        moving_kmh: float = DEFAULT_MOVING_KMH,
    ) -> None:
        self.stop_kmh = stop_kmh
        self.moving_kmh = moving_kmh
        self._phase = RunPhase.IDLE
        self._t0: int | None = None

    @property
    def phase(self) -> RunPhase:
        return self._phase

    @property
    def t0(self) -> int | None:
        return self._t0

    @property
    def is_running(self) -> bool:
        return self._phase is RunPhase.RUNNING

    def arm(self) -> None:
        self._phase = RunPhase.ARMED
        self._t0 = None
        logger.info("Run armed")

    def stop(self) -> None:
        if self._phase is not RunPhase.IDLE:
            logger.info("Run stopped", extra={"previous_phase": self._phase.value})
        self._phase = RunPhase.IDLE
        self._t0 = None

    def reset(self) -> None:
        self._phase = RunPhase.IDLE
        self._t0 = None

    def advance(self, speed_kmh: float, now_ms: int) -> bool:
        """Feed one smoothed speed; return True when this sample launches the run."""

        if self._phase is not RunPhase.ARMED:
            return False
        # Only a speed that reaches moving_kmh launches. Parked readings, the dead
        # zone and non-numeric speeds all fall through.
        if speed_kmh >= self.moving_kmh:
            self._phase = RunPhase.RUNNING
            self._t0 = now_ms
            logger.info("Run launched", extra={"t0_ms": now_ms, "speed_kmh": round(speed_kmh, 2)})
            return True
        return False
