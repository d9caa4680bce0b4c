"""Background atmosphere profiles and preparation of radiative transfer input."""

import logging
from bisect import bisect_left
from dataclasses import astuple, dataclass, fields

from .analysis import calculate_effective_radius_profile, calculate_qc_profile
from .constants import (
    C_P,
    M_MOL_AIR,
    M_MOL_CO2,
    M_MOL_H2O,
    M_MOL_NO2,
    M_MOL_O2,
    M_MOL_O3,
    RHO_AIR,
    RHO_CO2,
    RHO_H2O,
    RHO_NO2,
    RHO_O2,
    RHO_O3,
)

_log = logging.getLogger(__name__)

_SECONDS_PER_DAY = 24.0 * 60.0 * 60.0
_RE_MIN = 2.5
_RE_MAX = 55.0


@dataclass
class BackgroundLevel:
    """One level of a background atmosphere file (afglus layout)."""

    z: float
    p: float
    T: float
    air: float
    o3: float
    o2: float
    h2o: float
    co2: float
    no2: float

    @classmethod
    def parse(cls, line):
        """Read a level from a whitespace separated line of nine numbers."""
        parts = line.split()
        count = len(fields(cls))
        if len(parts) < count:
            raise ValueError(f"expected {count} values in atmosphere line: {line!r}")
        return cls(*(float(v) for v in parts[:count]))

    def __str__(self):
        return "".join(f"{v:>10.3g}" for v in astuple(self))


def read_atmosphere(lines):
    """Background levels from ``lines``, skipping blank lines and ``#`` comments."""
    for line in lines:
        if not line.strip() or line.startswith("#"):
            continue
        yield BackgroundLevel.parse(line)


def pairwise_mean(values):
    """Means of neighbouring values."""
    values = list(values)
    return [(a + b) / 2.0 for a, b in zip(values, values[1:])]


def divide_elementwise(numerator, denominator):
    """Element-wise quotient of two sequences."""
    return [a / b for a, b in zip(numerator, denominator)]


def multiply_all(values, factor):
    """Every value multiplied by ``factor``."""
    return [v * factor for v in values]


def from_number_to_volume_ratio(values, m_mol, rho):
    """Convert number mixing ratios of a gas of molar mass ``m_mol`` and density ``rho``."""
    return multiply_all(values, m_mol / M_MOL_AIR * RHO_AIR / rho)


def concatenate(first, second):
    """A new list holding the items of ``first`` followed by those of ``second``."""
    return [*first, *second]


def calculate_cloudproperties(superparticles, grid, cliqwp, reliq):
    """Liquid water path and effective radius per layer, top down.

    ``cliqwp`` and ``reliq`` hold the base values of every radiation layer,
    bottom up; the cloud contributions of the model layers are added to their
    first entries. Returns the new lists ``(cliqwp, reliq)`` ordered from the
    top, with the effective radius clamped to the range the solver accepts.
    """
    qc_sum = calculate_qc_profile(superparticles, grid)
    r_eff = calculate_effective_radius_profile(superparticles, grid)
    water_path = list(cliqwp)
    effective = list(reliq)
    for i, (qc, r) in enumerate(zip(qc_sum, r_eff)):
        water_path[i] += qc * 1.0e3 * grid.length
        effective[i] += r * 1.0e6
    water_path.reverse()
    effective.reverse()
    effective = [
        _RE_MIN if 0 <= r < _RE_MIN else min(r, _RE_MAX) for r in effective
    ]
    return water_path, effective


class RadiationSolver:
    """Radiative heating of the column above a background atmosphere.

    The background profile is read from ``filename``; ``sw`` and ``lw`` switch
    shortwave and longwave heating on.
    """

    def __init__(self, filename, sw, lw):
        self.sw = sw
        self.lw = lw
        try:
            with open(filename) as handle:
                levels = list(read_atmosphere(handle))
        except OSError:
            _log.warning("ifstream not good, check file name: %s", filename)
            levels = []

        def column(name):
            return [getattr(level, name) for level in levels]

        self.z = column("z")
        self.p = column("p")
        self.T = column("T")
        self.air = column("air")
        ratios = {
            name: divide_elementwise(column(name), self.air)
            for name in ("h2o", "o3", "o2", "no2", "co2")
        }
        self.h2o = pairwise_mean(
            from_number_to_volume_ratio(ratios["h2o"], M_MOL_H2O, RHO_H2O))
        self.o3 = pairwise_mean(
            from_number_to_volume_ratio(ratios["o3"], M_MOL_O3, RHO_O3))
        self.o2 = pairwise_mean(
            from_number_to_volume_ratio(ratios["o2"], M_MOL_O2, RHO_O2))
        self.no2 = pairwise_mean(
            from_number_to_volume_ratio(ratios["no2"], M_MOL_NO2, RHO_NO2))
        self.co2 = pairwise_mean(
            from_number_to_volume_ratio(ratios["co2"], M_MOL_CO2, RHO_CO2))
        self.T = pairwise_mean(self.T)

        self.T_lay_app = []
        self.p_lvl_app = []
        self.index = 0
        self.nlay = 0
        self.first = True

    def init(self, logger):
        """Record which bands are switched on."""
        logger.set_attr("sw", self.sw)
        logger.set_attr("lw", self.lw)

    def prepare_rad_solver_input(self, state):
        """Append the background atmosphere above the model top to the model profiles.

        Fills ``p_lvl_app`` (level pressures in hPa) and ``T_lay_app`` (layer
        temperatures), both ordered from the top of the atmosphere down.
        """
        p_ref = state.levels[-1].p / 100.0
        self.index = bisect_left(self.p, p_ref)

        p_above = [p * 100.0 for p in reversed(self.p[: self.index])]
        p_levels = concatenate((level.p for level in state.levels), p_above)
        self.p_lvl_app = [p / 100.0 for p in reversed(p_levels)]

        t_above = pairwise_mean(reversed(self.T))
        start = max(len(t_above) - self.index, 0)
        t_layers = concatenate((layer.T for layer in state.layers), t_above[start:])
        self.T_lay_app = list(reversed(t_layers))

    def apply_heating_rates(self, state, hr):
        """Set the radiative energy term of the model layers from heating rates.

        ``hr`` holds heating rates [K day-1] of all radiation layers, top down.
        """
        for layer, rate in zip(state.layers, reversed(hr)):
            layer.E = -rate / _SECONDS_PER_DAY * state.grid.length * C_P * RHO_AIR

    def calculate_radiation(self, state, superparticles):
        """Update the radiative energy term of ``state`` when a band is switched on."""
        if not (self.lw or self.sw):
            return
        if self.first:
            self.prepare_rad_solver_input(state)
            self.first = False
            self.nlay = len(self.T_lay_app)
        calculate_cloudproperties(
            superparticles, state.grid, [0.0] * self.nlay, [0.0] * self.nlay
        )
        raise RuntimeError(
            "no radiative transfer solver is available to compute sw/lw heating rates"
        )