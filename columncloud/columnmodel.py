"""Time stepping of the one-dimensional cloud column."""

import logging
import math
from dataclasses import replace

from .analysis import remove_unnucleated
from .state import Layer, State
from .thermodynamic import condensation, super_saturation

_log = logging.getLogger(__name__)


def cooling_the_column(state, dt):
    """Cool every layer at a constant rate over ``dt``."""
    cooling = -2.3e-5 * 24.0 * dt
    for layer in state.layers:
        layer.T += cooling


def check_state(state):
    """Raise ``ValueError`` if any layer holds negative water vapour."""
    if any(layer.qv < 0 for layer in state.layers):
        for i, layer in enumerate(state.layers):
            _log.error("index qv %d %s", i, layer.qv)
        raise ValueError("qv is smaller then zero ")


def check_s(state, old_state):
    """Raise ``ValueError`` if a supersaturated layer became subsaturated."""
    for layer, old in zip(state.layers, old_state.layers):
        s = super_saturation(layer.T, layer.p, layer.qv)
        old_s = super_saturation(old.T, old.p, old.qv)
        if old_s > 0 and s < 0:
            raise ValueError(
                "super saturation is smalle zero, this is not correct if "
                "radiation solver and fluctuation solver a turned off"
            )


def check_sp(superparticle):
    """Raise ``ValueError`` if a superparticle holds negative water or droplets."""
    if superparticle.qc < 0.0:
        raise ValueError(
            f"qc of one superparticle is smaller zero: {superparticle.qc:f}")
    if superparticle.n < 0:
        raise ValueError(
            f"N of one superparticle is smaller zero: {superparticle.n}")


def check_superparticles(superparticles, grid):
    """Check every superparticle with :func:`check_sp`."""
    for sp in superparticles:
        check_sp(sp)


def _copy_state(state):
    return replace(
        state,
        layers=[replace(layer) for layer in state.layers],
        levels=[replace(level) for level in state.levels],
    )


class ColumnModel:
    """Advances the column state and its superparticles until ``t_max``."""

    def __init__(self, initial_state, source, t_max, dt, radiation_solver, grid,
                 advection_solver, fluctuations, collisions, sedimentation):
        self.source = source
        self.state = _copy_state(initial_state)
        self.superparticles = []
        self.dt = dt
        self.t_max = t_max
        self.runs = 0
        self.radiation_solver = radiation_solver
        self.grid = grid
        self.advection_solver = advection_solver
        self.fluctuations = fluctuations
        self.collisions = collisions
        self.sedimentation = sedimentation

    def run(self, logger):
        """Run to ``t_max``, logging at the start and every 30 model seconds."""
        logger.initialize(self.state, self.dt)
        self.radiation_solver.init(logger)
        self.source.init(logger)
        logger.log(self.state, self.superparticles)
        while self._is_running():
            self.step()
            self._log_every_seconds(logger, 30.0)

    def _log_every_seconds(self, logger, dt_out):
        if not abs(math.remainder(self.runs * self.dt, dt_out)):
            logger.log(self.state, self.superparticles)

    def step(self):
        """Advance the model by one time step."""
        advection = self.advection_solver
        advection.advect(self.state, self.dt)
        advection.setup_draft(self.state, self.runs * self.dt)
        advection.keep_cloud_base(self.state)

        self.fluctuations.refresh(self.superparticles)
        old_state = _copy_state(self.state)

        self.superparticles.extend(
            self.source.generate_particles(self.state, self.dt, self.superparticles)
        )
        check_state(self.state)
        check_superparticles(self.superparticles, self.state.grid)

        self._do_condensation(old_state)
        remove_unnucleated(self.superparticles)
        self._do_collisions()
        remove_unnucleated(self.superparticles)
        self.radiation_solver.calculate_radiation(self.state, self.superparticles)

    def _do_condensation(self, old_state):
        for sp in self.superparticles:
            layer = old_state.layer_at(sp.z)
            level = old_state.upper_level_at(sp.z)
            s = (super_saturation(layer.T, layer.p, layer.qv)
                 + self.fluctuations.get_fluctuation(sp, self.dt))
            if sp.is_nucleated:
                tendencies = condensation(
                    sp.qc, sp.n, sp.r_dry, s, layer.T, layer.E, self.dt)
                self._apply_to_superparticle(sp, tendencies, level)
                self._apply_to_state(sp, tendencies)

    def _do_collisions(self):
        if self.collisions.needs_sorted_superparticles():
            self.superparticles.sort(key=lambda sp: sp.z)
        tendencies = self.collisions.collide(
            self.superparticles, self.state.grid, self.dt)
        if any(math.isnan(t.dqc) for t in tendencies):
            raise ValueError("collison dqc is nan")
        for sp, tendency in zip(self.superparticles, tendencies):
            sp.n = int(sp.n + tendency.dN)
            sp.qc += tendency.dqc
            sp.update()

    def _apply_to_superparticle(self, sp, tendencies, level):
        sp.v = level.w - self.sedimentation.fall_speed(sp.radius())
        cfl = sp.v * self.dt / self.state.grid.length
        if cfl > 1:
            raise ValueError(f"the cfl criteria is broken: cfl={cfl:f}")
        sp.z += self.dt * sp.v
        sp.qc += tendencies.dqc
        sp.update()
        check_sp(sp)

    def _apply_to_state(self, sp, tendencies):
        if sp.z >= 0:
            self.state.change_layer(sp.z, Layer(0.0, 0.0, -tendencies.dqc, 0.0))
        if sp.z <= 0.0 and sp.qc > 0 and sp.n > 0:
            self.state.qr_ground += sp.qc

    def _is_running(self):
        self.runs += 1
        self.state.t = self.runs * self.dt
        return self.state.t < self.t_max