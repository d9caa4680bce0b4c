import random

import pytest

from columncloud.grid import Grid
from columncloud.logger import Logger
from columncloud.sources import (
    NoParticleSource,
    SuperParticleSourceConstHeight,
    Twomey,
    feedback_qc,
    place_vertically_center,
    place_vertically_random,
)
from columncloud.state import Layer, Level, State
from columncloud.superparticle import Superparticle
from columncloud.thermodynamic import saturation_vapor


class _Recorder(Logger):
    def __init__(self):
        self.attrs = {}

    def set_attr(self, key, value):
        self.attrs[key] = value

    def log(self, state, superparticles):
        pass


class _LowestRng:
    def random(self):
        return 0.0


def _state(factor=1.1):
    grid = Grid(3.0, 1.0)
    layers = []
    for _ in grid.layers:
        T, p = 285.0, 95000.0
        layers.append(Layer(T=T, p=p, qv=saturation_vapor(T, p) * factor, E=0.0))
    levels = [Level(w=0.0, p=95000.0) for _ in grid.levels]
    return State(t=0.0, layers=layers, levels=levels, grid=grid)


@pytest.fixture
def table_file(tmp_path):
    path = tmp_path / "ns_data.txt"
    path.write_text("# s n\n0 0\n0.01 100\n0.02 200\n")
    return path


def test_place_vertically_random_stays_in_layer():
    state = _state()
    rng = random.Random(5)
    for index in range(state.grid.n_lay):
        for _ in range(200):
            z = place_vertically_random(rng, state, index)
            assert state.grid.level(index) < z < state.grid.level(index + 1)


def test_place_vertically_random_rejects_boundary():
    with pytest.raises(ValueError):
        place_vertically_random(_LowestRng(), _state(), 1)


def test_place_vertically_center():
    state = _state()
    assert place_vertically_center(state, 2) == state.grid.layer(2)


def test_feedback_qc_clamps_negative_vapour():
    layer = Layer(T=280.0, p=90000.0, qv=-0.5, E=0.0)
    feedback_qc([Superparticle(1.0e-5, 0.5, 1.0e-7, 10)], layer)
    assert layer.qv == 0.0


def test_feedback_qc_never_increases_vapour():
    layer = Layer(T=280.0, p=90000.0, qv=0.01, E=0.0)
    feedback_qc([Superparticle(1.0e-5, 0.5, 1.0e-7, 10)], layer)
    assert 0.0 <= layer.qv <= 0.01


def test_const_height_source():
    source = SuperParticleSourceConstHeight(2.5, 25, 7, lambda rng: 1.0e-7, random.Random(1))
    particles = source.generate_particles(_state(), 0.1, [])
    assert len(particles) == 3
    for sp in particles:
        assert sp.z == 2.5
        assert sp.r_dry == 1.0e-7
        assert sp.n == 7
        assert sp.qc == 0.0
        assert not sp.is_nucleated


def test_const_height_source_zero_rate():
    source = SuperParticleSourceConstHeight(2.5, 0, 7, lambda rng: 1.0e-7, random.Random(1))
    assert source.generate_particles(_state(), 0.1, []) == []


def test_twomey_init_logs_parameters(table_file):
    source = Twomey(random.Random(2), 4, 3, table_file)
    recorder = _Recorder()
    source.init(recorder)
    assert recorder.attrs == {"N_sp": 4, "N_multi": source.n_multi}
    assert source.n_multi == 50


def test_twomey_generates_particles_in_every_layer(table_file):
    state = _state()
    source = Twomey(random.Random(2), 4, state.grid.n_lay, table_file)
    particles = source.generate_particles(state, 0.1, [])
    assert len(particles) == len(source.stab) * state.grid.n_lay
    per_layer = [0] * state.grid.n_lay
    for sp in particles:
        per_layer[state.grid.layer_index(sp.z)] += 1
        assert sp.n == source.n_multi
        assert sp.qc > 0
        assert sp.is_nucleated
    assert per_layer == [len(source.stab)] * state.grid.n_lay


def test_twomey_skips_layers_already_activated(table_file):
    state = _state()
    source = Twomey(random.Random(2), 4, state.grid.n_lay, table_file)
    existing = Superparticle(1.0e-6, 0.5, 1.0e-7, len(source.stab) * source.n_multi)
    particles = source.generate_particles(state, 0.1, [existing])
    assert all(state.grid.layer_index(sp.z) != 0 for sp in particles)
    assert len(particles) == len(source.stab) * (state.grid.n_lay - 1)


def test_twomey_subsaturated_column_produces_nothing(table_file):
    state = _state(factor=0.9)
    source = Twomey(random.Random(2), 4, state.grid.n_lay, table_file)
    assert source.generate_particles(state, 0.1, []) == []


def test_no_particle_source(table_file):
    source = NoParticleSource(random.Random(1), 4, 3)
    recorder = _Recorder()
    source.init(recorder)
    assert recorder.attrs["N_sp"] == 4
    assert recorder.attrs["N_multi"] * 4 == 1.0e8
    assert source.generate_particles(_state(), 0.1, []) == []