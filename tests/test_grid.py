from snake_eater.grid import Direction, center, step, wrap


def test_wrap_inside_grid_is_identity():
    assert wrap((3, 4)) == (3, 4)


def test_wrap_negative_uses_floor_modulo():
    assert wrap((-1, 0)) == (29, 0)
    assert wrap((0, -1)) == (0, 19)


def test_wrap_past_far_edges():
    assert wrap((30, 20)) == (0, 0)


def test_step_wraps_each_edge():
    assert step((29, 5), Direction.RIGHT) == (0, 5)
    assert step((0, 5), Direction.LEFT) == (29, 5)
    assert step((5, 0), Direction.UP) == (5, 19)
    assert step((5, 19), Direction.DOWN) == (5, 0)


def test_opposites():
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    for d in Direction:
        assert d.opposite.opposite is d


def test_center_of_30_by_20():
    assert center() == (15, 10)
