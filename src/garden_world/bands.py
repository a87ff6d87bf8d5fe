"""Ordered lookup tables for the piecewise roll and scoring formulas.

Each table is a sequence of bands checked in order; the first band that
contains the value wins. Bands carry their own inclusivity so that range
edges behave exactly as the tables below specify.
"""

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Band(Generic[T]):
    """A numeric range mapped to a value.

    The lower bound is always inclusive. The upper bound is inclusive only
    when ``closed`` is set.
    """

    low: float
    high: float
    value: T
    closed: bool = False

    def contains(self, x: float) -> bool:
        if self.closed:
            return self.low <= x <= self.high
        return self.low <= x < self.high


def lookup(bands: Sequence[Band[T]], x: float, default: T) -> T:
    """Return the value of the first band containing ``x``, else ``default``."""
    for band in bands:
        if band.contains(x):
            return band.value
    return default


# Dice-total tables: integer ranges, inclusive at both ends.
# Values are base offsets; the generator adds rand()/10 to density.
DENSITY_BASE: tuple[Band[float], ...] = (
    Band(3, 6, 0.75, closed=True),
    Band(7, 10, 0.85, closed=True),
    Band(11, 14, 0.95, closed=True),
    Band(15, 17, 1.05, closed=True),
)
DENSITY_BASE_DEFAULT = 1.15

RESOURCES: tuple[Band[int], ...] = (
    Band(3, 4, -2, closed=True),
    Band(5, 7, -1, closed=True),
    Band(8, 13, 0, closed=True),
    Band(14, 16, 1, closed=True),
)
RESOURCES_DEFAULT = 2

# Hydrographics fraction -> absorption base offset, half-open.
ABSORPTION_BASE: tuple[Band[float], ...] = (
    Band(0.0, 0.2, 0.9),
    Band(0.2, 0.5, 0.87),
    Band(0.5, 0.9, 0.83),
)
ABSORPTION_BASE_DEFAULT = 0.79

# Habitability terms.
# Pressure bands overlap at their edges; order makes 0.5 score +1 and
# 0.8 score +2. Anything outside the bands, low or high, scores +1.
PRESSURE_SCORE: tuple[Band[int], ...] = (
    Band(0.01, 0.5, 1, closed=True),
    Band(0.5, 0.8, 2, closed=True),
    Band(0.8, 1.5, 3, closed=True),
)
PRESSURE_SCORE_DEFAULT = 1

HYDROGRAPHICS_SCORE: tuple[Band[int], ...] = (
    Band(0.0, 0.6, 1),
    Band(0.6, 0.9, 2),
    Band(0.9, 1.0, 1),
)

TEMPERATURE_SCORE: tuple[Band[int], ...] = (
    Band(255, 266, 1),
    Band(266, 322, 2),
    Band(322, 333, 1),
)
