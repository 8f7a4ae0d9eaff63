import logging

from fastapi import APIRouter, Depends

from launchmeter.core.session import EngineSession, get_session
from launchmeter.schemas.session import (
    EngineConfigOut,
    LocationSampleIn,
    ReadoutOut,
    ReplayIn,
    ReplayOut,
    SnapshotOut,
    SplitRowOut,
)
from launchmeter.services.formatting import readout, split_rows

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=SnapshotOut)
def current_snapshot(session: EngineSession = Depends(get_session)):
    with session.locked() as engine:
        return SnapshotOut.from_snapshot(engine.snapshot())


@router.post("/arm", response_model=SnapshotOut)
def arm_session(session: EngineSession = Depends(get_session)):
    """
    Start a fresh run and wait for the vehicle to launch.
    """
    with session.locked() as engine:
        return SnapshotOut.from_snapshot(engine.arm())


@router.post("/stop", response_model=SnapshotOut)
def stop_session(session: EngineSession = Depends(get_session)):
    with session.locked() as engine:
        return SnapshotOut.from_snapshot(engine.stop())


@router.post("/reset", response_model=SnapshotOut)
def reset_session(session: EngineSession = Depends(get_session)):
    with session.locked() as engine:
        return SnapshotOut.from_snapshot(engine.reset())


@router.post("/samples", response_model=SnapshotOut)
def ingest_sample(payload: LocationSampleIn, session: EngineSession = Depends(get_session)):
    sample = payload.to_sample()
    with session.locked() as engine:
        return SnapshotOut.from_snapshot(engine.ingest(sample))


@router.post("/replay", response_model=ReplayOut)
def replay_samples(payload: ReplayIn, session: EngineSession = Depends(get_session)):
    """
    Feed a recorded batch of fixes in order, as if they had arrived live.
    """
    samples = [item.to_sample() for item in payload.samples]
    with session.locked() as engine:
        accepted_before = engine.accepted_count
        ignored_before = engine.ignored_count
        engine.replay(samples)
        accepted = engine.accepted_count - accepted_before
        ignored = engine.ignored_count - ignored_before
        snapshot = engine.snapshot()

    logger.info("Replayed samples", extra={"accepted": accepted, "ignored": ignored})
    return ReplayOut(accepted=accepted, ignored=ignored, snapshot=SnapshotOut.from_snapshot(snapshot))


@router.get("/splits", response_model=list[SplitRowOut])
def split_board(session: EngineSession = Depends(get_session)):
    with session.locked() as engine:
        splits = engine.snapshot().splits
    return split_rows(splits)


@router.get("/readout", response_model=ReadoutOut)
def dashboard_readout(session: EngineSession = Depends(get_session)):
    with session.locked() as engine:
        snapshot = engine.snapshot()
    return ReadoutOut(phase=snapshot.phase, **readout(snapshot))


@router.get("/config", response_model=EngineConfigOut)
def engine_config(session: EngineSession = Depends(get_session)):
    engine = session.engine
    return EngineConfigOut(
        alpha=engine.alpha,
        stop_kmh=engine.config.stop_kmh,
        moving_kmh=engine.config.moving_kmh,
        thresholds_kmh=list(engine.thresholds),
    )
