"""Sources that insert new superparticles into the column."""

import math
from abc import ABC, abstractmethod

from .analysis import count_nucleated_ccn, supersaturation_profile
from .ns_table import nstable
from .search import indexes
from .superparticle import Superparticle
from .thermodynamic import cloud_water


def place_vertically_random(rng, state, index):
    """Random height inside layer ``index``."""
    grid = state.grid
    z = grid.layer(index) + grid.length / 2.0 * (2.0 * rng.random() - 1.0)
    if not grid.level(index) < z < grid.level(index + 1):
        raise ValueError(
            f"particle with height {z} is placed in the wrong layer "
            "by the placer_vertically_random routine"
        )
    return z


def place_vertically_center(state, index):
    """Height of the centre of layer ``index``."""
    return state.grid.layer(index)


def feedback_qc(particles, layer):
    """Remove the cloud water of new ``particles`` from the vapour of ``layer``.

    The sum is accumulated in whole units, truncating after every addition.
    """
    qc_sum = 0
    for sp in particles:
        qc_sum = int(qc_sum + sp.qc)
    if layer.qv > qc_sum:
        layer.qv -= qc_sum
    else:
        layer.qv = 0.0


class SuperParticleSource(ABC):
    """Interface of a superparticle source."""

    def init(self, logger):
        """Record the source's parameters with ``logger``."""

    @abstractmethod
    def generate_particles(self, state, dt, superparticles):
        """New superparticles for one time step of length ``dt``."""


class SuperParticleSourceConstHeight(SuperParticleSource):
    """Inserts ``rate`` unactivated particles per second at height ``z_insert``.

    ``distribution`` is called with ``rng`` to draw each dry radius.
    """

    def __init__(self, z_insert, rate, n, distribution, rng):
        self.z_insert = z_insert
        self.rate = rate
        self.n = n
        self.distribution = distribution
        self.rng = rng

    def generate_particles(self, state, dt, superparticles):
        count = math.ceil(dt * self.rate) if dt * self.rate > 0 else 0
        return [
            Superparticle(0.0, self.z_insert, self.distribution(self.rng), self.n)
            for _ in range(count)
        ]


class Twomey(SuperParticleSource):
    """Activates nuclei following a Twomey-type table of critical supersaturations."""

    def __init__(self, rng, n_sp, n_lay, table_path):
        self.rng = rng
        self.n_sp = n_sp
        self.n_lay = n_lay
        self.stab, self.n_multi = nstable(n_sp, table_path)

    def init(self, logger):
        logger.set_attr("N_sp", self.n_sp)
        logger.set_attr("N_multi", self.n_multi)

    def generate_particles(self, state, dt, superparticles):
        nucleated = count_nucleated_ccn(superparticles, state.grid)
        profile = supersaturation_profile(state)
        new = []
        for index, count in enumerate(indexes(self.stab, profile)):
            particles = self._n_particle(count * self.n_multi, nucleated[index], state, index)
            feedback_qc(particles, state.layers[index])
            new.extend(particles)
        return new

    def _n_particle(self, n, n_cmp, state, index):
        n_nuc = int((n - n_cmp) / self.n_multi)
        if n_nuc > self.n_sp:
            raise ValueError(
                f"more particles will nucleate then the maximal amount: {n_nuc}"
                f"compare with (max) N_sp{self.n_sp}"
            )
        r_crit = 1.0e-7
        r_dry = min(r_crit, 8.0e-10 / self.stab[-1]) if n_nuc > 0 else 0.0
        particles = []
        for i in range(n_nuc):
            r_init = min(r_crit, 8.0e-10 / self.stab[i])
            qc = max(math.nextafter(0.0, 1.0), cloud_water(self.n_multi, r_init, r_dry, 1.0))
            z = place_vertically_random(self.rng, state, index)
            if r_init < r_dry:
                raise ValueError(
                    f"the inital radius r_init: {r_init}is larger then r_dry: {r_dry}"
                )
            particles.append(Superparticle(qc, z, r_dry, self.n_multi))
        return particles


class NoParticleSource(SuperParticleSource):
    """A source that never produces particles."""

    def __init__(self, rng, n_sp, n_lay):
        self.rng = rng
        self.n_sp = int(n_sp)
        self.n_lay = n_lay
        self.n_multi = int(1.0e8 / float(n_sp)) if n_sp else 0

    def init(self, logger):
        logger.set_attr("N_sp", self.n_sp)
        logger.set_attr("N_multi", self.n_multi)

    def generate_particles(self, state, dt, superparticles):
        return []