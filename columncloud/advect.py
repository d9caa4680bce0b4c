"""Advection solvers that move water vapour above the cloud base of a column state."""

import math
from abc import ABC, abstractmethod

from .advection import (
    advect_first_order,
    first_order_upwind,
    second_first_order_upwind,
    second_order_upwind,
    sixth_order_wickerskamarock,
    third_order_upwind,
)
from .constants import PI
from .thermodynamic import saturation_vapor


def _cloud_bottom(state):
    index = math.floor(state.cloud_base / state.grid.length) - 1
    if index < 0:
        raise IndexError(f"cloud base {state.cloud_base} lies below the first layer")
    return index


def setup_draft(state, t, lifetime):
    """Set every level's vertical wind to a sine of period ``lifetime`` at time ``t``."""
    w = state.w_init * math.sin(2 * PI * t / lifetime)
    for level in state.levels:
        level.w = w


def keep_cloud_base(state, n):
    """Saturate the ``n`` layers starting at the cloud base."""
    start = _cloud_bottom(state)
    for layer in state.layers[start:start + n]:
        layer.qv = saturation_vapor(layer.T, layer.p)


class Advect(ABC):
    """Interface of an advection solver acting on a column state.

    Solvers with a ``lifetime`` drive a sinusoidal draft; solvers with a
    positive ``_kept_layers`` keep that many layers saturated at the cloud base.
    """

    lifetime = None
    _kept_layers = 0

    @abstractmethod
    def advect(self, state, dt):
        """Advance the water vapour of ``state`` by ``dt``."""

    def setup_draft(self, state, t):
        """Update the vertical wind for time ``t`` when the solver has a lifetime."""
        if self.lifetime is not None:
            setup_draft(state, t, self.lifetime)

    def keep_cloud_base(self, state):
        """Saturate the layers at the cloud base when the solver keeps any."""
        if self._kept_layers > 0:
            keep_cloud_base(state, self._kept_layers)


class AdvectFirstOrder(Advect):
    """Flux-form first-order advection of water vapour above the cloud base."""

    _scheme = staticmethod(advect_first_order)

    def advect(self, state, dt):
        start = _cloud_bottom(state)
        layers = state.layers[start:]
        q = [layer.qv for layer in layers]
        w = [level.w for level in state.levels[start:]]
        try:
            self._scheme(q, w, state.grid.length, dt)
        finally:
            for layer, qv in zip(layers, q):
                layer.qv = qv


class AdvectAndSetFirstOrder(AdvectFirstOrder):
    """First-order advection with a sinusoidal draft of period ``lifetime``."""

    def __init__(self, lifetime):
        self.lifetime = lifetime


class AdvectFirstOrderUpdraft(AdvectAndSetFirstOrder):
    """First-order upwind advection with a sinusoidal draft."""

    _scheme = staticmethod(first_order_upwind)


class AdvectSecondOrderUpdraft(AdvectAndSetFirstOrder):
    """Second-order upwind advection; keeps two layers saturated at the cloud base."""

    _scheme = staticmethod(second_order_upwind)
    _kept_layers = 2


class AdvectSecondFirstOrderUpdraft(AdvectAndSetFirstOrder):
    """Second-order upwind in updrafts, first-order in downdrafts."""

    _scheme = staticmethod(second_first_order_upwind)
    _kept_layers = 2


class AdvectThirdOrderUpdraft(AdvectAndSetFirstOrder):
    """Third-order upwind advection; keeps three layers saturated at the cloud base."""

    _scheme = staticmethod(third_order_upwind)
    _kept_layers = 3


class AdvectSixthOrderWickerSkamarock(AdvectAndSetFirstOrder):
    """Sixth-order Wicker-Skamarock advection; keeps four layers saturated."""

    _scheme = staticmethod(sixth_order_wickerskamarock)
    _kept_layers = 4