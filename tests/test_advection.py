import pytest

from columncloud.advection import (
    advect_first_order,
    first_order_upwind,
    second_first_order_upwind,
    second_order_upwind,
    sixth_order_wickerskamarock,
    third_order_upwind,
)


def test_advect_first_order_positive_wind_moves_one_cell():
    q = [1.0, 0.0, 0.0]
    advect_first_order(q, [1.0, 1.0], 1.0, 1.0)
    assert q[0] == 1
    assert q[1] > 0
    assert q[1] == 1
    assert q[2] == 0


def test_advect_first_order_negative_wind_moves_one_cell():
    q = [1.0, 0.0, 1.0]
    advect_first_order(q, [-1.0, -1.0], 1.0, 1.0)
    assert q[0] == 1
    assert q[1] > 0
    assert q[1] == 1
    assert q[2] == 1


def test_advect_first_order_raises_when_cfl_broken():
    q = [1.0, 0.0, 1.0]
    with pytest.raises(ValueError):
        advect_first_order(q, [-1.0, -1.0], 1.0, 2.0)


@pytest.mark.parametrize(
    "q, w, expected",
    [
        ([0, 1, 0], 1, [0, 0, 1]),
        ([1, 0, 0], 1, [1, 1, 0]),
        ([0, 0, 1], 1, [0, 0, 0]),
        ([0, 0, 1], -1, [0, 1, 1]),
        ([0, 1, 0], -1, [1, 0, 0]),
        ([1, 0, 0], -1, [0, 0, 0]),
    ],
)
def test_first_order_upwind(q, w, expected):
    q = [float(v) for v in q]
    first_order_upwind(q, [w], 1.0, 1.0)
    assert q == expected


@pytest.mark.parametrize(
    "q, w, expected",
    [
        ([0, 0, 0], 1, [0, 0, 0]),
        ([1, 0, 0], 1, [1, 0, -1 / 2.0]),
        ([0, 1, 0], 1, [0, 1, 2.0]),
        ([0, 0, 1], 1, [0, 0, -0.5]),
        ([0, 0, 1], -1, [-0.5, 0, 1]),
        ([0, 1, 0], -1, [2.0, 1, 0]),
        ([1, 0, 0], -1, [-1.0 / 2.0, 0, 0]),
    ],
)
def test_second_order_upwind(q, w, expected):
    q = [float(v) for v in q]
    second_order_upwind(q, [w], 1.0, 1.0)
    assert q == expected


@pytest.mark.parametrize(
    "q, w, expected",
    [
        ([0, 0, 0, 0], 1, [0, 0, 0, 0]),
        ([1, 0, 0, 0], 1, [1, 0, -1.0 / 6.0, 0]),
        ([0, 1, 0, 0], 1, [0, 1, 1, 0]),
        ([0, 0, 0, 1], 1, [0, 0, -1 / 3.0, 1]),
        ([0, 0, 0, 0], -1, [0, 0, 0, 0]),
        ([0, 0, 0, 1], -1, [0, -1 / 6.0, 0, 1]),
        ([0, 0, 1, 0], -1, [0, 1, 1, 0]),
        ([1, 0, 0, 0], -1, [1, -1 / 3.0, 0, 0]),
    ],
)
def test_third_order_upwind(q, w, expected):
    q = [float(v) for v in q]
    third_order_upwind(q, [w], 1.0, 1.0)
    assert q == expected


def test_sixth_order_wickerskamarock_updraft_empty():
    q = [0.0] * 6
    sixth_order_wickerskamarock(q, [1.0], 1.0, 1.0)
    assert q == [0, 0, 0, 0, 0, 0]


def test_sixth_order_wickerskamarock_updraft_ground():
    q = [1.0, 0.0, 0.0, 0.0, 0.0, 0.0]
    sixth_order_wickerskamarock(q, [1.0], 1.0, 1.0)
    assert q == [1, 0, 0, -1 / 60.0, 0, 0]


def test_second_first_order_upwind_updraft_is_second_order():
    q1 = [0.0, 1.0, 3.0, 2.0, 5.0]
    q2 = list(q1)
    second_first_order_upwind(q1, [0.5], 1.0, 1.0)
    second_order_upwind(q2, [0.5], 1.0, 1.0)
    assert q1 == q2


def test_second_first_order_upwind_downdraft_is_first_order():
    q1 = [0.0, 1.0, 3.0, 2.0, 5.0]
    q2 = list(q1)
    second_first_order_upwind(q1, [-0.5], 1.0, 1.0)
    first_order_upwind(q2, [-0.5], 1.0, 1.0)
    assert q1 == q2


@pytest.mark.parametrize(
    "scheme",
    [first_order_upwind, second_order_upwind, third_order_upwind, second_first_order_upwind,
     sixth_order_wickerskamarock],
)
def test_zero_wind_leaves_profile_unchanged(scheme):
    q = [0.0, 1.0, 3.0, 2.0, 5.0, 4.0, 0.5, 2.5]
    original = list(q)
    scheme(q, [0.0], 1.0, 1.0)
    assert q == original


@pytest.mark.parametrize(
    "scheme",
    [first_order_upwind, second_order_upwind, third_order_upwind, sixth_order_wickerskamarock],
)
def test_downdraft_mirrors_updraft(scheme):
    profile = [0.0, 1.0, 3.0, 2.0, 5.0, 4.0, 0.5, 2.5]
    up = list(profile)
    scheme(up, [0.5], 1.0, 1.0)
    down = list(reversed(profile))
    scheme(down, [-0.5], 1.0, 1.0)
    assert list(reversed(down)) == pytest.approx(up)


def test_first_order_upwind_conserves_interior_shift_with_unit_courant():
    q = [0.0, 2.0, 3.0, 0.0, 0.0]
    first_order_upwind(q, [1.0], 1.0, 1.0)
    assert q == [0.0, 0.0, 2.0, 3.0, 0.0]