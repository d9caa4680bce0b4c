"""Phase relaxation time of supersaturation per grid layer."""

import math


class TauRelax:
    """Relaxation times of each layer, derived from the droplets it holds."""

    A2 = 2.8e-4

    def __init__(self, grid):
        self.grid = grid
        self.tau_relax = []

    def refresh(self, superparticles):
        """Recompute the relaxation times from ``superparticles``."""
        one_over_tau = [0.0] * self.grid.n_lay
        for sp in superparticles:
            one_over_tau[self.grid.layer_index(sp.z)] += sp.radius() * sp.n
        self.tau_relax = [
            1.0 / (x * self.A2) if x > 0.0 else math.inf for x in one_over_tau
        ]

    def __call__(self, z):
        """Relaxation time of the layer containing height ``z``."""
        return self.tau_relax[self.grid.layer_index(z)]