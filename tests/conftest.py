"""Shared test fixtures for garden world tests."""

import pytest
import structlog

from garden_world.types import GardenWorld, WorldSize


class ScriptedDice:
    """Dice source that replays queued results.

    Once a queue runs dry, dice totals fall back to the average roll
    (3.5 per die) and fractions fall back to 0.0.
    """

    def __init__(self, totals=(), fractions=()):
        self.totals = list(totals)
        self.fractions = list(fractions)
        self.calls: list[tuple[int, int]] = []
        self.fraction_calls = 0

    def dice_sum(self, count: int, sides: int = 6) -> float:
        self.calls.append((count, sides))
        if self.totals:
            return self.totals.pop(0)
        return 3.5 * count

    def fraction(self) -> float:
        self.fraction_calls += 1
        if self.fractions:
            return self.fractions.pop(0)
        return 0.0


@pytest.fixture
def average_dice() -> ScriptedDice:
    """Dice that always roll the average total and a zero fraction."""
    return ScriptedDice()


@pytest.fixture
def make_world():
    """Factory for GardenWorld snapshots with Earth-like defaults."""

    def _make(**overrides) -> GardenWorld:
        fields = dict(
            size=WorldSize.STANDARD,
            atmospheric_mass=1.0,
            marginal_atmosphere=False,
            hydrographics=0.7,
            surface_temp=288.0,
            absorption=0.88,
            blackbody=0.16,
            blackbody_temp=280.0,
            density=1.0,
            gravity=1.0,
            resources=0,
        )
        fields.update(overrides)
        return GardenWorld(**fields)

    return _make


@pytest.fixture
def scripted_dice() -> type[ScriptedDice]:
    """The ScriptedDice class, for building dice with queued results."""
    return ScriptedDice


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()
