from pydantic_settings import BaseSettings, SettingsConfigDict

from launchmeter.models.engine_config import (
    DEFAULT_MOVING_KMH,
    DEFAULT_SMOOTHING_ALPHA,
    DEFAULT_SPEED_THRESHOLDS_KMH,
    DEFAULT_STOP_KMH,
    EngineConfig,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Measurement engine (static for the lifetime of a session)
    SMOOTHING_ALPHA: float = DEFAULT_SMOOTHING_ALPHA
    STOP_KMH: float = DEFAULT_STOP_KMH
    MOVING_KMH: float = DEFAULT_MOVING_KMH
    SPEED_THRESHOLDS_KMH: list[float] = list(DEFAULT_SPEED_THRESHOLDS_KMH)

    # Observability
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            alpha=self.SMOOTHING_ALPHA,
            stop_kmh=self.STOP_KMH,
            moving_kmh=self.MOVING_KMH,
            thresholds_kmh=tuple(self.SPEED_THRESHOLDS_KMH),
        )


settings = Settings()
