import math
import random

import pytest

from columncloud.fluctuations import (
    MarkovFluctuationSolver,
    NoFluctuationSolver,
    integral_timescale,
    make_fluctuation_solver,
    ornstein_uhlenbeck_process,
    saturation_fluctuations,
    turbulent_kinetic_energy,
    w_standard,
)
from columncloud.grid import Grid
from columncloud.superparticle import Superparticle


def test_tke():
    assert abs(turbulent_kinetic_energy(10.0, 10.0e-4) - 5.2e-2) < 1.0e-2


def test_integral_time_scale():
    tke = turbulent_kinetic_energy(10.0, 10.0e-4)
    assert abs(integral_timescale(10.0, tke) - 29.0) < 0.2


def test_ornstein_uhlenbeck_process_stays_bounded():
    rng = random.Random(12345)
    w = 0.0
    w_max = 0.0
    dt = 0.02
    w_std = 0.5440625136744149
    tau = 49.80365826707145
    for _ in range(int(20 * 60 / dt)):
        w = ornstein_uhlenbeck_process(rng, w, dt, tau, w_std)
        if abs(w) > abs(w_max):
            w_max = w
        assert abs(w_max) < 5.0


def test_ornstein_uhlenbeck_zero_step_keeps_value():
    rng = random.Random(3)
    assert ornstein_uhlenbeck_process(rng, 0.7, 0.0, 10.0, 0.5) == 0.7


def test_w_standard_of_zero_energy():
    assert w_standard(0.0) == 0.0


def test_saturation_fluctuations_without_relaxation():
    assert saturation_fluctuations(1.0, 0.1, math.inf, 0.0) == pytest.approx(3.0e-5)


def test_saturation_fluctuations_relax_without_velocity():
    assert saturation_fluctuations(0.0, 1.0, 2.0, 0.4) == pytest.approx(0.2)


def test_saturation_fluctuations_markov_solver():
    rng = random.Random(7)
    grid = Grid(300.0, 100.0)
    sp = [Superparticle(0.00001, 50, 1.0e-6, 100000000)]
    solver = make_fluctuation_solver(rng, "markov", 50.0e-4, 50, grid)
    assert isinstance(solver, MarkovFluctuationSolver)
    for _ in range(1000):
        solver.refresh(sp)
        value = solver.get_fluctuation(sp[0], 0.1)
        assert value == sp[0].s_prime
        assert math.isfinite(sp[0].s_prime)
        assert math.isfinite(sp[0].w_prime)
    assert sp[0].w_prime != 0.0


def test_no_fluctuations():
    solver = make_fluctuation_solver(random.Random(1), "none", 1.0, 1.0, Grid(3.0, 1.0))
    assert isinstance(solver, NoFluctuationSolver)
    sp = Superparticle(0.00001, 1.5, 1.0e-6, 100)
    solver.refresh([sp])
    assert solver.get_fluctuation(sp, 0.1) == 0.0
    assert sp.s_prime == 0.0