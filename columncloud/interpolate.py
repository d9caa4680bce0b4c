"""Linear and bilinear interpolation between tabulated points."""

import logging

_log = logging.getLogger(__name__)


def linear_interpolate(x1, y1, x2, y2, x):
    """Value at ``x`` of the line through ``(x1, y1)`` and ``(x2, y2)``."""
    if x1 > x2:
        _log.warning(
            "linear interpolation: points may be in the wrong order: x1 %s x2 %s", x1, x2
        )
    a = (y2 - y1) / (x2 - x1)
    b = y2 - a * x2
    return a * x + b


def bi_linear_interpolate(x11, x12, v11, v12, x21, x22, v21, v22, x, y):
    """Bilinear interpolation on the rectangle spanned by ``(x11, x12)`` and ``(x21, x22)``.

    ``v11`` sits at ``(x11, x12)``, ``v21`` at ``(x21, x12)``,
    ``v12`` at ``(x11, x22)`` and ``v22`` at ``(x21, x22)``.
    """
    if x11 > x21:
        _log.warning(
            "linear interpolation: points may be in the wrong order: x11 %s x21 %s", x11, x21
        )
    if x12 > x22:
        _log.warning(
            "linear interpolation: points may be in the wrong order: x12 %s x22 %s", x12, x22
        )
    low = linear_interpolate(x11, v11, x21, v21, x)
    high = linear_interpolate(x11, v12, x21, v22, x)
    return linear_interpolate(x12, low, x22, high, y)