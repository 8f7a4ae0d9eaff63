from launchmeter.services.run_state import RunPhase, RunStateMachine


def test_starts_idle_without_time_origin():
    machine = RunStateMachine()
    assert machine.phase is RunPhase.IDLE
    assert machine.t0 is None


def test_idle_machine_ignores_fast_samples():
    machine = RunStateMachine()
    assert machine.advance(50.0, 1000) is False
    assert machine.phase is RunPhase.IDLE


def test_hysteresis_dead_zone_does_not_launch():
    machine = RunStateMachine(stop_kmh=1.0, moving_kmh=3.0)
    machine.arm()

    launched = [
        machine.advance(v, t)
        for v, t in [(0.0, 0), (0.5, 200), (2.0, 400), (0.5, 600), (4.0, 800)]
    ]

    assert launched == [False, False, False, False, True]
    assert machine.phase is RunPhase.RUNNING
    assert machine.t0 == 800


def test_launch_exactly_at_moving_threshold():
    machine = RunStateMachine(stop_kmh=1.0, moving_kmh=3.0)
    machine.arm()
    assert machine.advance(3.0, 500) is True
    assert machine.t0 == 500


def test_running_keeps_its_time_origin():
    machine = RunStateMachine()
    machine.arm()
    machine.advance(10.0, 1000)

    machine.advance(0.0, 2000)
    machine.advance(50.0, 3000)

    assert machine.phase is RunPhase.RUNNING
    assert machine.t0 == 1000


def test_arm_from_running_clears_time_origin():
    machine = RunStateMachine()
    machine.arm()
    machine.advance(10.0, 1000)

    machine.arm()

    assert machine.phase is RunPhase.ARMED
    assert machine.t0 is None


def test_stop_and_reset_return_to_idle():
    machine = RunStateMachine()
    machine.arm()
    machine.advance(10.0, 1000)

    machine.stop()
    assert machine.phase is RunPhase.IDLE
    assert machine.t0 is None

    machine.arm()
    machine.reset()
    assert machine.phase is RunPhase.IDLE


def test_nan_speed_never_launches():
    machine = RunStateMachine(stop_kmh=1.0, moving_kmh=3.0)
    machine.arm()

    assert machine.advance(float("nan"), 100) is False
    assert machine.phase is RunPhase.ARMED
    assert machine.t0 is None

    assert machine.advance(3.5, 200) is True
    assert machine.t0 == 200
