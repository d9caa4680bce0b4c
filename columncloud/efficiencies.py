"""Collision efficiencies of droplet pairs."""

from .interpolate import bi_linear_interpolate

_R_REMAP = (0, 0, 1, 2, 3, 4, 5, 6, 6, 6, 7, 7, 7, 7, 7, 8, 8, 8, 8, 8,
            9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9)

_R_REF = (10, 20, 30, 40, 50, 60, 70, 100, 150, 200, 300)

_RATIO_REF = (0.05, 0.10, 0.15, 0.20, 0.25, 0.30, 0.35, 0.40, 0.45, 0.50,
              0.55, 0.60, 0.65, 0.70, 0.75, 0.80, 0.85, 0.90, 0.95, 1.00)

_EFFICIENCIES = (
    (0.0001, 0.0001, 0.0001, 0.014, 0.017, 0.019, 0.022, 0.027, 0.030, 0.033,
     0.035, 0.037, 0.038, 0.038, 0.037, 0.036, 0.035, 0.032, 0.029, 0.027),
    (0.0001, 0.0001, 0.005, 0.016, 0.022, 0.03, 0.043, 0.052, 0.064, 0.072,
     0.079, 0.082, 0.080, 0.076, 0.067, 0.057, 0.048, 0.040, 0.033, 0.027),
    (0.0001, 0.002, 0.02, 0.04, 0.085, 0.17, 0.27, 0.40, 0.50, 0.55,
     0.58, 0.59, 0.58, 0.54, 0.51, 0.49, 0.47, 0.45, 0.47, 0.52),
    (0.001, 0.07, 0.28, 0.50, 0.62, 0.68, 0.74, 0.78, 0.80, 0.80,
     0.80, 0.78, 0.77, 0.76, 0.77, 0.77, 0.78, 0.79, 0.95, 1.40),
    (0.005, 0.40, 0.60, 0.70, 0.78, 0.83, 0.86, 0.88, 0.90, 0.90,
     0.90, 0.90, 0.89, 0.88, 0.88, 0.89, 0.92, 1.01, 1.30, 2.30),
    (0.05, 0.43, 0.64, 0.77, 0.84, 0.87, 0.89, 0.90, 0.91, 0.91,
     0.91, 0.91, 0.91, 0.92, 0.93, 0.95, 1.00, 1.03, 1.70, 3.00),
    (0.20, 0.58, 0.75, 0.84, 0.88, 0.90, 0.92, 0.94, 0.95, 0.95,
     0.95, 0.95, 0.95, 0.95, 0.97, 1.00, 1.02, 1.04, 2.30, 4.00),
    (0.50, 0.79, 0.91, 0.95, 0.95) + (1.00,) * 15,
    (0.77, 0.93, 0.97, 0.97) + (1.00,) * 16,
    (0.87, 0.96, 0.98) + (1.00,) * 17,
    (0.97,) + (1.00,) * 19,
)

_UNIT_EFFICIENCIES = ((1.0,) * len(_RATIO_REF),) * len(_R_REF)


def _interpolate(table, big_r, ratio):
    i_r = max(int(big_r * 0.1), 0)
    i_r = _R_REMAP[min(i_r, len(_R_REMAP) - 1)]
    i_ratio = min(max(int(ratio * 20 - 1), 0), 18)
    return bi_linear_interpolate(
        _RATIO_REF[i_ratio], _R_REF[i_r],
        table[i_r][i_ratio], table[i_r + 1][i_ratio],
        _RATIO_REF[i_ratio + 1], _R_REF[i_r + 1],
        table[i_r][i_ratio + 1], table[i_r + 1][i_ratio + 1],
        ratio, big_r,
    )


class UnitEfficiencies:
    """Every collision leads to coalescence."""

    def collision_efficiency(self, big_r, ratio):
        return _interpolate(_UNIT_EFFICIENCIES, big_r, ratio)


class Efficiencies:
    """Tabulated collision efficiencies interpolated bilinearly.

    ``big_r`` is the collector radius in micrometres and ``ratio`` the ratio
    of the collected to the collector radius.
    """

    def collision_efficiency(self, big_r, ratio):
        return _interpolate(_EFFICIENCIES, big_r, ratio)