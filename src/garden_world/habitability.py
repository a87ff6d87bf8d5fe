"""Quantities derived from a generated world.

These are pure functions of the snapshot: calling them repeatedly on the
same world gives the same answer and never touches the dice.
"""

from typing import TYPE_CHECKING

from .bands import (
    HYDROGRAPHICS_SCORE,
    PRESSURE_SCORE,
    PRESSURE_SCORE_DEFAULT,
    TEMPERATURE_SCORE,
    lookup,
)
from .sizes import WorldSize

if TYPE_CHECKING:
    from .types import GardenWorld

LARGE_PRESSURE_MULTIPLIER = 5


def atmospheric_pressure(world: "GardenWorld") -> float:
    """Surface pressure in atmospheres."""
    result = world.atmospheric_mass * world.gravity
    if world.size == WorldSize.LARGE:
        result *= LARGE_PRESSURE_MULTIPLIER
    return result


def pressure_score(pressure: float) -> int:
    # Pressures outside every band still score +1.
    return lookup(PRESSURE_SCORE, pressure, PRESSURE_SCORE_DEFAULT)


def atmosphere_score(marginal: bool) -> int:
    return 0 if marginal else 1


def hydrographics_score(hydrographics: float) -> int:
    """Full ocean coverage (exactly 1.0) scores nothing."""
    return lookup(HYDROGRAPHICS_SCORE, hydrographics, 0)


def temperature_score(surface_temp: float) -> int:
    return lookup(TEMPERATURE_SCORE, surface_temp, 0)


def habitability(world: "GardenWorld") -> int:
    """Habitability score summed over pressure, atmosphere, water and climate.

    Args:
        world: Generated world snapshot.

    Returns:
        Integer score; higher is more hospitable.
    """
    return (
        pressure_score(atmospheric_pressure(world))
        + atmosphere_score(world.marginal_atmosphere)
        + hydrographics_score(world.hydrographics)
        + temperature_score(world.surface_temp)
    )
