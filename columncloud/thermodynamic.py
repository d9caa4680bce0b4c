"""Cloud microphysics: saturation, nucleation, condensation and droplet sizes."""

import logging
import math
from dataclasses import dataclass

from .constants import (
    C_P,
    D,
    ES0,
    GAMMA,
    H_LAT,
    K,
    M_MOL_H2O,
    M_MOL_S,
    PI,
    R_G,
    R_V,
    RHO_AIR,
    RHO_H2O,
    RHO_S,
    T0,
)

_log = logging.getLogger(__name__)


@dataclass
class Tendencies:
    """Changes of cloud water and temperature produced by one process."""

    dqc: float = 0.0
    dT: float = 0.0

    def __iadd__(self, other):
        self.dqc += other.dqc
        self.dT += other.dT
        return self

    def __str__(self):
        return f"{self.dqc} {self.dT}"


def _divide(a, b):
    """Floating point division that yields inf or nan instead of raising."""
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a)


def _cube_root(x):
    if math.isnan(x) or x < 0:
        return math.nan
    return x ** (1.0 / 3.0)


def super_saturation(t, p, qv):
    """Supersaturation of vapour mixing ratio ``qv`` at temperature ``t`` and pressure ``p``."""
    return qv / saturation_vapor(t, p) - 1


def saturation_vapor(t, p):
    """Saturation mixing ratio of water vapour."""
    es = saturation_pressure(t)
    return R_G / R_V * es / (p - es)


def will_nucleate(r_dry, s, t):
    """True if a dry particle of radius ``r_dry`` activates at supersaturation ``s``."""
    return s > critical_saturation(r_dry, t)


def kelvins_parameter(t):
    """Curvature term of the Koehler equation."""
    return 2 * GAMMA / R_V / RHO_H2O / t


def raoults_parameter(r_dry):
    """Solute term of the Koehler equation for a sodium chloride nucleus."""
    return 2 * r_dry * r_dry * r_dry * RHO_S * M_MOL_H2O / RHO_H2O / M_MOL_S


def critical_saturation(r_dry, t):
    """Critical supersaturation for activation of a nucleus of radius ``r_dry``."""
    kp = kelvins_parameter(t)
    return math.sqrt(4.0 * kp * kp * kp / 27.0 / raoults_parameter(r_dry))


def condensation(qc, n, r_dry, s, t, e, dt):
    """Cloud water and temperature tendencies of diffusional growth over ``dt``."""
    tendencies = Tendencies(0.0, 0.0)
    r_old = radius(qc, n, r_dry)
    es = saturation_pressure(t)
    r_new = condensation_solver(r_old, es, t, s, e, dt)
    if r_new < r_dry:
        tendencies.dqc = -qc
    else:
        tendencies.dqc = cloud_water(n, r_new, r_old)
    tendencies.dT = H_LAT / C_P * tendencies.dqc
    return tendencies


def _radius(qc, n, rho):
    return _cube_root(_divide(3.0 / 4.0 / PI * qc * rho / RHO_H2O, n))


def radius(qc, n, r_min=0.0, rho=RHO_AIR):
    """Droplet radius of ``n`` droplets holding ``qc`` around nuclei of radius ``r_min``."""
    return _radius(qc + cloud_water(n, r_min, 0.0, rho), n, rho)


def _cloud_water(n, r, rho):
    return 4.0 / 3.0 * PI * r * r * r * RHO_H2O / rho * n


def cloud_water(n, r, r_min=0.0, rho=RHO_AIR):
    """Liquid water of ``n`` droplets of radius ``r`` in excess of radius ``r_min``."""
    return _cloud_water(n, r, rho) - _cloud_water(n, r_min, rho)


def saturation_pressure(t):
    """Saturation vapour pressure over a flat water surface (Magnus formula)."""
    return ES0 * math.exp(17.62 * (t - T0) / (243.12 + (t - T0)))


def condensation_solver(r_old, es, t, s, e, dt):
    """Radius after one explicit step of diffusional growth."""
    return r_old + dt * diffusional_growth(r_old, es, t, s, e, dt)


def diffusional_growth(r_old, es, t, s, e, dt):
    """Rate of change of the droplet radius, including radiative heating ``e``."""
    c1 = H_LAT * H_LAT / (R_V * K * t * t) + R_V * t / (D * es)
    c2 = H_LAT / (R_V * K * t * t)
    return (_divide(s, r_old) + c2 * e) / (c1 * RHO_H2O)


def fall_speed(r):
    """Terminal fall speed of a droplet of radius ``r`` (piecewise approximation)."""
    if r > 2.0e-3:
        _log.warning("large drops present, adjust droplet fall_speed function, r=%s", r)
    k1 = 1.19e8
    k2 = 8e3
    k3 = 2.01e2
    r1 = 40.0e-6
    r2 = 0.6e-3
    if r < r1:
        return k1 * r * r
    if r < r2:
        return k2 * r
    return k3 * math.sqrt(r)