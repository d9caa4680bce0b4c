"""Vertical profiles computed from superparticles and the column state."""

import math

from .thermodynamic import super_saturation


def _quotient(a, b):
    """``a / b`` with IEEE semantics, a not-a-number result replaced by zero."""
    if b:
        q = a / b
    elif a and not math.isnan(a):
        q = math.copysign(math.inf, a)
    else:
        q = 0.0
    return 0.0 if math.isnan(q) else q


def remove_unnucleated(superparticles):
    """Drop every superparticle that is not nucleated, in place."""
    superparticles[:] = [sp for sp in superparticles if sp.is_nucleated]


def count_sp(superparticles, grid, predicate, value):
    """Sum ``value(sp)`` per layer over the superparticles accepted by ``predicate``."""
    res = [0] * grid.n_lay
    for sp in superparticles:
        if predicate(sp):
            res[grid.layer_index(sp.z)] += value(sp)
    return res


def _falling(sp):
    return sp.is_nucleated and sp.v < 0


def _nucleated(sp):
    return sp.is_nucleated


def count_falling(superparticles, grid):
    """Number of falling nucleated superparticles per layer."""
    return count_sp(superparticles, grid, _falling, lambda sp: 1)


def count_falling_ccn(superparticles, grid):
    """Number of droplets in falling nucleated superparticles per layer."""
    return count_sp(superparticles, grid, _falling, lambda sp: sp.n)


def count_nucleated(superparticles, grid):
    """Number of nucleated superparticles per layer."""
    return count_sp(superparticles, grid, _nucleated, lambda sp: 1)


def count_nucleated_ccn(superparticles, grid):
    """Number of droplets in nucleated superparticles per layer."""
    return count_sp(superparticles, grid, _nucleated, lambda sp: sp.n)


def calculate_qc_profile(superparticles, grid):
    """Cloud water per layer."""
    return [float(q) for q in count_sp(superparticles, grid, _nucleated, lambda sp: sp.qc)]


def calculate_maximal_radius_profile(superparticles, grid):
    """Largest droplet radius per layer, zero where there is none."""
    res = [0.0] * grid.n_lay
    for sp in superparticles:
        if sp.is_nucleated:
            index = grid.layer_index(sp.z)
            res[index] = max(sp.radius(), res[index])
    return res


def calculate_minimal_radius_profile(superparticles, grid):
    """Smallest of zero and the droplet radii per layer."""
    res = [0.0] * grid.n_lay
    for sp in superparticles:
        if sp.is_nucleated:
            index = grid.layer_index(sp.z)
            res[index] = min(sp.radius(), res[index])
    return res


def calculate_effective_radius_profile(superparticles, grid):
    """Ratio of the third to the second radius moment per layer."""
    r2 = [0.0] * grid.n_lay
    r3 = [0.0] * grid.n_lay
    for sp in superparticles:
        if sp.is_nucleated:
            index = grid.layer_index(sp.z)
            r = sp.radius()
            r2[index] += r ** 2
            r3[index] += r ** 3
    return [_quotient(a, b) for a, b in zip(r3, r2)]


def calculate_mean_radius_profile(superparticles, grid):
    """Mean droplet radius per layer, zero where there is none."""
    count = [0.0] * grid.n_lay
    total = [0.0] * grid.n_lay
    for sp in superparticles:
        if sp.is_nucleated:
            index = grid.layer_index(sp.z)
            count[index] += 1
            total[index] += sp.radius()
    return [_quotient(a, b) for a, b in zip(total, count)]


def calculate_stddev_radius_profile(superparticles, grid):
    """Root mean square radius minus mean radius per layer."""
    count = [0.0] * grid.n_lay
    r2 = [0.0] * grid.n_lay
    total = [0.0] * grid.n_lay
    for sp in superparticles:
        if sp.is_nucleated:
            index = grid.layer_index(sp.z)
            r = sp.radius()
            count[index] += 1
            r2[index] += r ** 2
            total[index] += r
    mean = [_quotient(a, b) for a, b in zip(total, count)]
    rms = [math.sqrt(_quotient(a, b)) for a, b in zip(r2, count)]
    return [a - b for a, b in zip(rms, mean)]


def supersaturation_profile(state):
    """Supersaturation of every layer of ``state``."""
    return [super_saturation(layer.T, layer.p, layer.qv) for layer in state.layers]