from __future__ import annotations

import logging
import math
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from launchmeter.core.config import Settings
from launchmeter.models.location_sample import InvalidSampleError

request_logger = logging.getLogger("launchmeter.request")
error_logger = logging.getLogger("launchmeter.error")

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128


def resolve_request_id(header_value: str | None) -> str:
    """Reuse a caller's request id when it is short printable text, else mint one."""

    candidate = (header_value or "").strip()
    if candidate and len(candidate) <= MAX_REQUEST_ID_LENGTH and candidate.isprintable():
        return candidate
    return uuid4().hex


def _json_safe_float(value: float) -> float | str:
    # Starlette refuses to encode NaN/inf, and rejected fixes echo them back.
    return value if math.isfinite(value) else str(value)


def _init_sentry(settings: Settings) -> bool:
    if not settings.SENTRY_DSN:
        return False

    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
    except ImportError:
        error_logger.warning("SENTRY_DSN is set but sentry_sdk is missing; error reporting disabled")
        return False

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[FastApiIntegration()],
    )
    # Engine tuning travels with every event so reports can be reproduced.
    engine = settings.engine_config()
    sentry_sdk.set_context(
        "engine",
        {
            "alpha": engine.alpha,
            "stop_kmh": engine.stop_kmh,
            "moving_kmh": engine.moving_kmh,
            "thresholds_kmh": list(engine.thresholds_kmh),
        },
    )
    return True


def _request_fields(request: Request, request_id: str, started: float) -> dict:
    return {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "query": request.url.query,
        "client_ip": request.client.host if request.client else None,
        "duration_ms": round((perf_counter() - started) * 1000, 2),
    }


def setup_observability(app: FastAPI, settings: Settings) -> None:
    if _init_sentry(settings):
        request_logger.info(
            "Sentry initialized",
            extra={"sentry_traces_sample_rate": settings.SENTRY_TRACES_SAMPLE_RATE},
        )

    @app.exception_handler(InvalidSampleError)
    async def invalid_sample_handler(request: Request, exc: InvalidSampleError):
        request_id = getattr(request.state, "request_id", None)
        return JSONResponse(status_code=400, content={"detail": str(exc), "request_id": request_id})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        detail = jsonable_encoder(exc.errors(), custom_encoder={float: _json_safe_float})
        return JSONResponse(
            status_code=422,
            content={"detail": detail, "request_id": getattr(request.state, "request_id", None)},
        )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        started = perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            error_logger.exception(
                "Unhandled request exception",
                extra=_request_fields(request, request_id, started),
            )
            response = JSONResponse(
                status_code=500,
                content={"detail": "Internal server error", "request_id": request_id},
            )

        # Rejected fixes and bad commands show up as warnings, not routine traffic.
        level = logging.WARNING if 400 <= response.status_code < 500 else logging.INFO
        request_logger.log(
            level,
            "Request completed",
            extra={**_request_fields(request, request_id, started), "status_code": response.status_code},
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
