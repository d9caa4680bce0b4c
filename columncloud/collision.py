"""Collision and coalescence of superparticles sharing a grid layer."""

import logging
from abc import ABC, abstractmethod
from bisect import bisect_left
from dataclasses import dataclass
from operator import attrgetter
from typing import NamedTuple

from .constants import PI, RHO_H2O
from .efficiencies import Efficiencies

_log = logging.getLogger(__name__)
_height = attrgetter("z")


class HallCollisionKernel:
    """Gravitational collision kernel with tabulated collision efficiencies."""

    def __init__(self, efficiencies):
        self.efficiencies = efficiencies

    def __call__(self, r, big_r, dfs):
        """Kernel of a droplet of radius ``r`` and a collector of radius ``big_r``.

        ``dfs`` is the difference of their fall speeds.
        """
        if big_r <= 0.0:
            _log.warning("R in hall_collision_kernal is zero of smaller: %s", big_r)
        ratio = r / big_r if big_r else 0.0
        return (
            PI * (big_r + r) * (big_r + r) * abs(dfs)
            * self.efficiencies.collision_efficiency(big_r * 1.0e6, ratio)
        )


@dataclass
class SpMassTendencies:
    """Changes of cloud water and droplet number of one superparticle."""

    dqc: float = 0.0
    dN: float = 0.0


class Collisions(ABC):
    """Interface of a collision solver."""

    @abstractmethod
    def collide(self, superparticles, grid, dt):
        """Tendencies for every superparticle, in the same order."""

    @abstractmethod
    def needs_sorted_superparticles(self):
        """True if ``collide`` expects superparticles sorted by height."""


class _Drop(NamedTuple):
    r: float
    index: int
    n: float
    fs: float


class BoxCollisions:
    """Collisions among all superparticles of one well-mixed box."""

    def __init__(self, sedimentation, kernel):
        self.sedimentation = sedimentation
        self.kernel = kernel

    def collide(self, superparticles, dt):
        """Tendencies of ``superparticles`` colliding with each other over ``dt``."""
        particles = list(superparticles)
        out = [SpMassTendencies() for _ in particles]
        if len(particles) < 2:
            return out
        drops = sorted(
            (
                _Drop(r, i, float(sp.n), self.sedimentation.fall_speed(r))
                for i, sp in enumerate(particles)
                for r in (sp.radius(),)
            ),
            key=attrgetter("r"),
        )
        for i, drop in enumerate(drops):
            tendency = out[drop.index]
            tendency.dN = self._number_change(drops, i, dt)
            tendency.dqc = 4.0 / 3.0 * PI * RHO_H2O * drop.n * self._mass_change(drops, i, dt)
        return out

    def _number_change(self, drops, i, dt):
        drop = drops[i]
        internal = -self.kernel(drop.r, drop.r, 0.0) * 0.5 * drop.n * (drop.n - 1)
        external = 0.0
        for other in drops[i + 1:]:
            external -= self.kernel(drop.r, other.r, drop.fs - other.fs) * drop.n * other.n
        return dt * (internal + external)

    def _mass_change(self, drops, i, dt):
        drop = drops[i]
        ri = drop.r
        from_smaller = 0.0
        for other in drops[:i]:
            rj = other.r
            from_smaller += (
                self.kernel(rj, ri, drop.fs - other.fs) * other.n * rj * rj * rj
            )
        from_larger = 0.0
        for other in drops[i + 1:]:
            from_larger -= (
                self.kernel(ri, other.r, drop.fs - other.fs) * other.n * ri * ri * ri
            )
        return dt * (from_smaller + from_larger)


class BoxCollisionAdapter(Collisions):
    """Applies a box collider to each grid layer of height-sorted superparticles."""

    def __init__(self, box_collider):
        self.box_collider = box_collider

    def collide(self, superparticles, grid, dt):
        tendencies = [SpMassTendencies() for _ in superparticles]
        levels = grid.levels
        if not levels:
            return tendencies
        start = bisect_left(superparticles, levels[0], key=_height)
        for level in levels[1:]:
            stop = bisect_left(superparticles, level, lo=start, key=_height)
            tendencies[start:stop] = self.box_collider.collide(
                superparticles[start:stop], dt
            )
            start = stop
        return tendencies

    def needs_sorted_superparticles(self):
        return True


class NoCollisions(Collisions):
    """Superparticles never collide."""

    def collide(self, superparticles, grid, dt):
        return [SpMassTendencies() for _ in superparticles]

    def needs_sorted_superparticles(self):
        return False


def make_hall_collisions(sedimentation):
    """Layer-wise collisions with the Hall kernel."""
    box = BoxCollisions(sedimentation, HallCollisionKernel(Efficiencies()))
    return BoxCollisionAdapter(box)


def make_no_collisions():
    """A solver without collisions."""
    return NoCollisions()