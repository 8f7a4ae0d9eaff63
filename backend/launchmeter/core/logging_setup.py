from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any

# Attributes every LogRecord carries; anything else came in through extra=.
_RESERVED_FIELDS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """One compact JSON object per record, with extra= fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _RESERVED_FIELDS or key.startswith("_"):
                continue
            payload[key] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False, separators=(",", ":"))


def build_logging_config(level: str = "INFO") -> dict[str, Any]:
    level_name = (level or "INFO").upper()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"json": {"()": "launchmeter.core.logging_setup.JsonFormatter"}},
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "level": level_name,
            }
        },
        "root": {"handlers": ["default"], "level": level_name},
        "loggers": {
            # The request middleware already logs every request with its id.
            "uvicorn.access": {"level": "WARNING"},
        },
    }


def configure_logging(level: str = "INFO") -> None:
    dictConfig(build_logging_config(level))
