"""Superparticles: groups of identical droplets tracked through the column."""

import logging
from dataclasses import dataclass, field

from .thermodynamic import radius as _droplet_radius

_log = logging.getLogger(__name__)


@dataclass
class Superparticle:
    """``n`` identical droplets on nuclei of radius ``r_dry`` at height ``z``.

    ``qc`` is the cloud water the droplets hold beyond their dry nuclei.
    ``is_nucleated`` and the droplet radius are refreshed by :meth:`update`,
    which must be called after ``qc``, ``z``, ``r_dry`` or ``n`` change.
    """

    qc: float
    z: float
    r_dry: float
    n: int
    v: float = 0.0
    s_prime: float = 0.0
    w_prime: float = 0.0
    is_nucleated: bool = field(default=True, init=False)
    _radius: float = field(default=0.0, init=False, repr=False, compare=False)

    def __post_init__(self):
        self.n = int(self.n)
        self.update()

    def radius(self):
        """Droplet radius as of the last :meth:`update`."""
        return self._radius

    def update(self):
        """Recompute the droplet radius and whether the particle is still active."""
        self._radius = _droplet_radius(self.qc, self.n, self.r_dry, 1.0)
        self.is_nucleated = self._nucleation()

    def _nucleation(self):
        if self.qc <= 0:
            return False
        if self.z <= 0:
            _log.info("particle reached the ground, r:%s", self._radius)
            return False
        if self.n <= 0:
            return False
        return True

    def __str__(self):
        return (
            f"{self.qc}qc {self.z}z {self.r_dry}r_dry {self.n}N "
            f"{int(self.is_nucleated)}is_nucleated "
        )