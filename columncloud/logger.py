"""Output of the column state and superparticle profiles."""

import logging
import time
from abc import ABC, abstractmethod

from .analysis import (
    calculate_maximal_radius_profile,
    calculate_mean_radius_profile,
    calculate_qc_profile,
    count_nucleated,
    supersaturation_profile,
)

_log = logging.getLogger(__name__)

_HEADER = (
    "     layer         z         E         p         T        qv         S"
    "        qc    r_mean     r_max     N_nuc"
)


def time_stamp():
    """Current local time as ``YYYY-MM-DD_HH:MM:SS``."""
    return time.strftime("%Y-%m-%d_%H:%M:%S", time.localtime())


def _cell(value):
    if isinstance(value, int):
        return f"{value:>10}"
    return f"{value:>10.3g}"


class Logger(ABC):
    """Receives the model state at output times."""

    def initialize(self, state, dt):
        """Prepare for output of ``state`` stepped with ``dt``."""

    def set_attr(self, key, value):
        """Record a run parameter."""

    @abstractmethod
    def log(self, state, superparticles):
        """Write out the current state and superparticles."""


class StdoutLogger(Logger):
    """Prints a table of layer profiles to standard output."""

    def log(self, state, superparticles):
        grid = state.grid
        qc_sum = calculate_qc_profile(superparticles, grid)
        r_mean = calculate_mean_radius_profile(superparticles, grid)
        r_max = calculate_maximal_radius_profile(superparticles, grid)
        nucleated = count_nucleated(superparticles, grid)
        saturation = supersaturation_profile(state)

        lines = ["", f"State at {state.t:g}", _HEADER]
        for i, layer in enumerate(state.layers):
            row = (
                i, grid.layer(i), layer.E, layer.p, layer.T, layer.qv,
                saturation[i], qc_sum[i], r_mean[i], r_max[i], nucleated[i],
            )
            lines.append("".join(_cell(value) for value in row))
        lines.append("")
        print("\n".join(lines))


def create_logger(config):
    """Logger described by ``config`` with keys ``type``, ``file_name`` and ``dir_name``."""
    kind = config["type"]
    file_name = config["file_name"]
    dir_name = config["dir_name"]
    _log.info("%s", file_name)
    if file_name == "time_stamp":
        file_name = time_stamp()
        _log.info("%s", file_name)
    if kind == "netcdf":
        _log.warning(
            "netcdf output to %s%s is not available, writing to stdout", dir_name, file_name
        )
    return StdoutLogger()