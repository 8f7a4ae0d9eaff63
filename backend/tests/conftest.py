from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from launchmeter.core.session import EngineSession, get_session
from launchmeter.main import app
from launchmeter.models.engine_config import EngineConfig
from launchmeter.services.measurement import MeasurementEngine


@pytest.fixture()
def engine_session() -> EngineSession:
    return EngineSession(MeasurementEngine(EngineConfig()))


@pytest.fixture()
def api_client(engine_session: EngineSession) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_session] = lambda: engine_session
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_session, None)
