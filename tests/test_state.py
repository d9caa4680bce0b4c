import math

import pytest

from columncloud.constants import G
from columncloud.grid import Grid
from columncloud.state import (
    Layer,
    Level,
    State,
    exponential_qv,
    hydrostatic_pressure,
    linear_temperature,
)


@pytest.fixture
def state():
    grid = Grid(30.0, 10.0)
    layers = [Layer(T=280.0 + i, p=1000.0 * i, qv=0.01 * i, E=0.0) for i in range(grid.n_lay)]
    levels = [Level(w=float(i), p=500.0 * i) for i in range(grid.n_lvl)]
    return State(0.0, layers, levels, grid)


def test_layer_iadd_adds_all_fields():
    layer = Layer(T=1.0, p=2.0, qv=3.0, E=4.0)
    layer += Layer(T=10.0, p=20.0, qv=30.0, E=40.0)
    assert layer == Layer(T=11.0, p=22.0, qv=33.0, E=44.0)


def test_level_iadd_changes_only_w():
    level = Level(w=1.0, p=7.0)
    level += Level(w=2.0, p=100.0)
    assert level.w == 3.0
    assert level.p == 7.0


@pytest.mark.parametrize("z", [0.0, 5.0, 15.0, 29.0])
def test_layer_at_is_layer_of_grid_index(state, z):
    assert state.layer_at(z) is state.layers[state.grid.layer_index(z)]


def test_change_layer_mutates_state(state):
    before = state.layers[1].qv
    state.change_layer(15.0, Layer(0.0, 0.0, -0.005, 0.0))
    assert state.layers[1].qv == pytest.approx(before - 0.005)
    assert state.layers[0].qv == 0.0


def test_levels_bracket_height(state):
    assert state.lower_level_at(15.0) is state.levels[1]
    assert state.upper_level_at(15.0) is state.levels[2]


def test_levels_coincide_on_boundary(state):
    assert state.lower_level_at(20.0) is state.upper_level_at(20.0)


def test_negative_height_raises(state):
    with pytest.raises(IndexError):
        state.layer_at(-5.0)


def test_hydrostatic_pressure_surface_and_slope():
    assert hydrostatic_pressure(0.0, 100000.0) == 100000.0
    assert hydrostatic_pressure(1.0, 0.0) == pytest.approx(-G)


def test_linear_temperature_surface_and_decrease():
    assert linear_temperature(0.0, 286.0) == 286.0
    assert linear_temperature(1000.0, 286.0) < linear_temperature(500.0, 286.0)


def test_exponential_qv_decays_geometrically():
    qv0, zc = 0.01, 500.0
    assert exponential_qv(0.0, qv0, zc) == qv0
    ratio1 = exponential_qv(zc, qv0, zc) / qv0
    ratio2 = exponential_qv(2 * zc, qv0, zc) / exponential_qv(zc, qv0, zc)
    assert math.isclose(ratio1, ratio2)
    assert ratio1 < 1.0