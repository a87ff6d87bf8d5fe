"""Dice-rolling source consumed by the world generator."""

import math
from typing import Protocol

import numpy as np
import structlog

from .exceptions import DiceContractError

logger = structlog.get_logger()

DEFAULT_SIDES = 6


class DiceRoller(Protocol):
    """Source of dice totals and uniform fractions."""

    def dice_sum(self, count: int, sides: int = DEFAULT_SIDES) -> float:
        """Sum of ``count`` independent uniform draws from 1..sides."""
        ...

    def fraction(self) -> float:
        """Uniform random fraction in [0, 1)."""
        ...


class NumpyDice:
    """DiceRoller backed by a numpy random Generator."""

    def __init__(self, rng: np.random.Generator):
        self._rng = rng

    @classmethod
    def from_seed(cls, seed: int | None = None) -> "NumpyDice":
        """Create dice from a seed (None draws fresh OS entropy)."""
        return cls(np.random.default_rng(seed))

    def dice_sum(self, count: int, sides: int = DEFAULT_SIDES) -> int:
        return int(self._rng.integers(1, sides + 1, size=count).sum())

    def fraction(self) -> float:
        return float(self._rng.random())


def n_d(dice: DiceRoller, count: int, sides: int = DEFAULT_SIDES) -> float:
    """Roll ``count`` dice and check the total against the dice contract.

    Raises:
        DiceContractError: If the request is malformed or the total is
            non-finite or outside [count, count * sides].
    """
    if count < 1 or sides < 1:
        raise DiceContractError(f"Invalid dice request: {count}d{sides}")

    total = dice.dice_sum(count, sides)
    if not math.isfinite(total) or not count <= total <= count * sides:
        logger.error("dice_total_out_of_range", count=count, sides=sides, total=total)
        raise DiceContractError(
            f"Dice source returned {total!r} for {count}d{sides}"
        )
    return total


def rand(dice: DiceRoller) -> float:
    """Draw a uniform fraction and check it lies in [0, 1).

    Raises:
        DiceContractError: If the fraction is non-finite or out of range.
    """
    value = dice.fraction()
    if not math.isfinite(value) or not 0.0 <= value < 1.0:
        logger.error("fraction_out_of_range", value=value)
        raise DiceContractError(f"Dice source returned fraction {value!r}")
    return value
