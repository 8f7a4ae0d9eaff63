from fastapi import FastAPI

from launchmeter.core.config import settings
from launchmeter.core.logging_setup import configure_logging
from launchmeter.core.observability import setup_observability
from launchmeter.routes.session import router as session_router

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Launch Meter")
setup_observability(app, settings)

app.include_router(session_router)


@app.get("/health")
def health():
    return {"status": "ok"}
