"""Thermodynamic state of the column: layers, levels and initial profiles."""

import math
from dataclasses import dataclass, field

from .constants import G, LAPSE_RATE_A
from .grid import Grid


@dataclass
class Layer:
    """Quantities held at a layer centre."""

    T: float = 0.0
    p: float = 0.0
    qv: float = 0.0
    E: float = 0.0

    def __iadd__(self, other):
        self.T += other.T
        self.p += other.p
        self.qv += other.qv
        self.E += other.E
        return self


@dataclass
class Level:
    """Quantities held at a level (layer boundary)."""

    w: float = 0.0
    p: float = 0.0

    def __iadd__(self, other):
        self.w += other.w
        return self


@dataclass
class State:
    """Time, layers and levels of the column on a grid."""

    t: float
    layers: list = field(default_factory=list)
    levels: list = field(default_factory=list)
    grid: Grid = None
    cloud_base: float = 0.0
    w_init: float = 0.0
    qr_ground: float = 0.0

    @staticmethod
    def _checked(items, index):
        if index < 0:
            raise IndexError(f"height below the column, index is: {index}")
        return items[index]

    def layer_at(self, z):
        """The layer containing height ``z``."""
        return self._checked(self.layers, math.floor(z / self.grid.length))

    def change_layer(self, z, tendencies):
        """Add ``tendencies`` to the layer containing height ``z``."""
        layer = self.layer_at(z)
        layer += tendencies

    def lower_level_at(self, z):
        """The level at or below height ``z``."""
        return self._checked(self.levels, math.floor(z / self.grid.length))

    def upper_level_at(self, z):
        """The level at or above height ``z``."""
        return self._checked(self.levels, math.ceil(z / self.grid.length))


def exponential_qv(z, qv0, zc):
    """Water vapour decaying exponentially with scale height ``zc``."""
    return qv0 * math.exp(-z / zc)


def linear_temperature(z, t0):
    """Temperature following the dry adiabatic lapse rate from ``t0``."""
    return t0 - LAPSE_RATE_A * z


def hydrostatic_pressure(z, p0):
    """Linearised hydrostatic pressure from surface pressure ``p0``."""
    return p0 - G * z