"""Procedural GURPS garden world generation.

Rolls the physical statistics of a habitable planet (size, atmosphere,
hydrographics, temperature, gravity, resources) from chained dice rolls
and derives a habitability score from them.

Generation logs through structlog, one debug event per roll. structlog's
unconfigured default prints every level to stdout, so library callers
should call ``configure_logging()`` (or their own ``structlog.configure``)
before generating; the CLI does this itself.
"""

from .config import Config, GeneratorSettings, LoggingSettings, find_config, load_config
from .dice import DiceRoller, NumpyDice, n_d, rand
from .exceptions import DiceContractError, GardenWorldError
from .generator import WorldGenerator, generate_world
from .logging import configure_logging
from .habitability import atmospheric_pressure, habitability
from .render import render
from .types import GardenWorld, WorldSize

__all__ = [
    # Types
    "GardenWorld",
    "WorldSize",
    # Dice
    "DiceRoller",
    "NumpyDice",
    "n_d",
    "rand",
    # Generation
    "WorldGenerator",
    "generate_world",
    # Derived quantities
    "atmospheric_pressure",
    "habitability",
    "render",
    "configure_logging",
    # Config
    "Config",
    "GeneratorSettings",
    "LoggingSettings",
    "find_config",
    "load_config",
    # Exceptions
    "GardenWorldError",
    "DiceContractError",
]
