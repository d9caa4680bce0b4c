"""Terminal fall speeds of cloud droplets."""

from abc import ABC, abstractmethod

from .interpolate import linear_interpolate
from .search import left_index_min_zero_max_smallerlast

_DIAMETERS_MM = (
    0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0, 1.2, 1.4, 1.6, 1.8, 2.0, 2.2, 2.4,
    2.6, 2.8, 3.0, 3.2, 3.4, 3.6, 3.8, 4.0, 4.2, 4.4, 4.6, 4.8, 5.0, 5.2, 5.4, 5.6, 5.8,
)
_SPEEDS = (
    0.27, 0.72, 1.17, 1.62, 2.06, 2.47, 2.87, 3.27, 3.67, 4.03, 4.64, 5.17, 5.65, 6.09,
    6.49, 6.90, 7.27, 7.57, 7.82, 8.06, 8.26, 8.44, 8.60, 8.72, 8.83, 8.92, 8.98, 9.03,
    9.07, 9.09, 9.12, 9.14, 9.16, 9.17,
)


class Sedimentation(ABC):
    """Interface of a fall speed law."""

    @abstractmethod
    def fall_speed(self, r):
        """Terminal fall speed [m s-1] of a droplet of radius ``r`` [m]."""


class FallSpeedLU(Sedimentation):
    """Fall speeds from a lookup table, Stokes law below the table, capped at 10 m/s."""

    def __init__(self):
        self.r = [d / 2000.0 for d in _DIAMETERS_MM]
        self.v = list(_SPEEDS)

    def fall_speed(self, r):
        if r < self.r[0]:
            k1 = 1.19e8
            speed = k1 * r * r
        else:
            idx = left_index_min_zero_max_smallerlast(self.r, r)
            speed = linear_interpolate(
                self.r[idx], self.v[idx], self.r[idx + 1], self.v[idx + 1], r
            )
        return min(speed, 10.0)


class NoFallSpeed(Sedimentation):
    """Droplets that do not fall."""

    def fall_speed(self, r):
        return 0.0