"""Sub-grid supersaturation fluctuations driven by turbulent vertical velocity."""

import math
from abc import ABC, abstractmethod

from .constants import PI
from .tau_relax import TauRelax


def turbulent_kinetic_energy(l, epsilon):
    """Turbulent kinetic energy for mixing length ``l`` and dissipation ``epsilon``."""
    c = 0.845
    return (l * epsilon / c) ** (2.0 / 3.0)


def w_standard(e):
    """Standard deviation of the vertical velocity for kinetic energy ``e``."""
    return math.sqrt(2.0 / 3.0 * e)


def integral_timescale(l, tke):
    """Lagrangian integral time scale of the turbulence."""
    c = 1.5
    return l / (2.0 * PI) ** (1.0 / 3.0) * math.sqrt(c / tke)


def ornstein_uhlenbeck_process(rng, w, dt, tau, w_std):
    """Advance the velocity ``w`` of an Ornstein-Uhlenbeck process by ``dt``."""
    decay = math.exp(-dt / tau)
    return w * decay + math.sqrt(1 - math.exp(-2 * dt / tau)) * w_std * rng.gauss(0.0, 1.0)


def saturation_fluctuations(w_prime, dt, tau_r, s_prime):
    """Advance the supersaturation fluctuation ``s_prime`` by ``dt``."""
    a1 = 3.0e-4
    return s_prime + dt * (a1 * w_prime - s_prime / tau_r)


class FluctuationSolver(ABC):
    """Interface of a supersaturation fluctuation model."""

    @abstractmethod
    def refresh(self, superparticles):
        """Update internal state from the current superparticles."""

    @abstractmethod
    def get_fluctuation(self, superparticle, dt):
        """Advance and return the fluctuation seen by ``superparticle``."""


class MarkovFluctuationSolver(FluctuationSolver):
    """Fluctuations from a Markov velocity process and phase relaxation."""

    def __init__(self, rng, epsilon, l, grid):
        self.rng = rng
        self.epsilon = epsilon
        self.l = l
        self.tau_relax = TauRelax(grid)

    def refresh(self, superparticles):
        self.tau_relax.refresh(superparticles)

    def get_fluctuation(self, superparticle, dt):
        tke = turbulent_kinetic_energy(self.l, self.epsilon)
        tau = integral_timescale(self.l, tke)
        w_std = w_standard(tke)
        superparticle.w_prime = ornstein_uhlenbeck_process(
            self.rng, superparticle.w_prime, dt, tau, w_std
        )
        tau_r = self.tau_relax(superparticle.z)
        superparticle.s_prime = saturation_fluctuations(
            superparticle.w_prime, dt, tau_r, superparticle.s_prime
        )
        return superparticle.s_prime


class NoFluctuationSolver(FluctuationSolver):
    """No fluctuations at all."""

    def refresh(self, superparticles):
        pass

    def get_fluctuation(self, superparticle, dt):
        return 0.0


def make_fluctuation_solver(rng, kind, epsilon, l, grid):
    """A Markov solver for ``kind == "markov"``, otherwise one without fluctuations."""
    if kind == "markov":
        return MarkovFluctuationSolver(rng, epsilon, l, grid)
    return NoFluctuationSolver()