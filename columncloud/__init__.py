"""Superparticle column model of warm cloud microphysics: grid, thermodynamics,
advection, condensation, collisions, sources and time stepping."""

__version__ = "0.1.0"