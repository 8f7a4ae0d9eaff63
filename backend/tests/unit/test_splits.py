from launchmeter.services.splits import new_split_table, observe


def test_new_table_is_unset_and_ordered():
    table = new_split_table([40, 60, 80])
    assert [s.target_kmh for s in table] == [40.0, 60.0, 80.0]
    assert all(s.elapsed_ms is None for s in table)


def test_observe_without_time_origin_is_a_no_op():
    table = new_split_table([40, 60])
    assert observe(table, None, 5000, 200.0) is table


def test_observe_sets_every_reached_target():
    table = new_split_table([40, 60, 80])
    table = observe(table, 1000, 3500, 65.0)
    assert [s.elapsed_ms for s in table] == [2500, 2500, None]


def test_split_is_write_once():
    table = new_split_table([40, 60])
    table = observe(table, 0, 1000, 45.0)

    # drop below and come back above: the 40 split must not move
    table = observe(table, 0, 2000, 10.0)
    table = observe(table, 0, 3000, 45.0)
    table = observe(table, 0, 4000, 61.0)

    assert table[0].elapsed_ms == 1000
    assert table[1].elapsed_ms == 4000


def test_monotone_acceleration_gives_non_decreasing_splits():
    table = new_split_table([40, 60, 80, 100, 120, 140, 160, 180, 200])
    t0 = 10_000
    speed = 0.0
    for step in range(1, 200):
        speed += 1.3
        table = observe(table, t0, t0 + step * 100, speed)

    times = [s.elapsed_ms for s in table]
    assert all(t is not None for t in times)
    assert times == sorted(times)
