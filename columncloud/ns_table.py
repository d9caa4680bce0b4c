"""Table of activation supersaturations by number of activated nuclei."""

import math
from pathlib import Path

from .interpolate import linear_interpolate
from .search import left_index_min_zero_max_smallerlast


def load_data(path):
    """Read ``(n, s)`` columns from a file of ``s n`` lines; ``#`` starts a comment."""
    n = []
    s = []
    with Path(path).open() as handle:
        for line in handle:
            if line.startswith("#") or not line.strip():
                continue
            fields = line.split()
            s.append(float(fields[0]))
            n.append(float(fields[1]))
    return n, s


def calculate_stable(n, s, nx):
    """Supersaturations interpolated from ``(n, s)`` at every number in ``nx``."""
    out = []
    for x in nx:
        i = left_index_min_zero_max_smallerlast(n, x)
        out.append(linear_interpolate(n[i], s[i], n[i + 1], s[i + 1], x))
    return out


def nstable(n_sp, path):
    """Supersaturation thresholds for ``n_sp`` superparticles and their multiplicity.

    Returns the table and the number of droplets each superparticle stands for.
    """
    n, s = load_data(path)
    maximum = max(n)
    step = maximum / float(n_sp)
    n_multi = math.floor(step)
    nx = arange(step, maximum, step)
    return calculate_stable(n, s, nx), n_multi


def arange(start, stop, step):
    """Values ``start + i * step`` below ``stop``; empty unless ``step`` is positive."""
    out = []
    if step > 0:
        i = 0
        item = start
        while item < stop:
            out.append(float(item))
            i += 1
            item = start + i * step
    return out