"""Garden world generation orchestration.

A world is produced by a fixed sequence of dice rolls. Later rolls depend
on the results of earlier ones, so the order of the ``roll_*`` calls in
``WorldGenerator.generate`` is also the order in which the dice source is
consumed.
"""

import math

import structlog

from .bands import (
    ABSORPTION_BASE,
    ABSORPTION_BASE_DEFAULT,
    DENSITY_BASE,
    DENSITY_BASE_DEFAULT,
    RESOURCES,
    RESOURCES_DEFAULT,
    lookup,
)
from .config import GeneratorSettings
from .dice import DiceRoller, NumpyDice, n_d, rand
from .types import GardenWorld, WorldSize

logger = structlog.get_logger()

LARGE_SIZE_THRESHOLD = 17
MARGINAL_THRESHOLD = 11
LARGE_HYDROGRAPHICS_BONUS = 0.2


def roll_size(dice: DiceRoller) -> WorldSize:
    """3d6 of 17 or more makes a large world."""
    total = n_d(dice, 3)
    size = WorldSize.STANDARD if total < LARGE_SIZE_THRESHOLD else WorldSize.LARGE
    logger.debug("size_rolled", total=total, size=size.value)
    return size


def roll_atmospheric_mass(dice: DiceRoller) -> float:
    total = n_d(dice, 3)
    mass = total / 10 - 0.05 + rand(dice) / 10
    logger.debug("atmospheric_mass_rolled", total=total, mass=mass)
    return mass


def roll_marginal_atmosphere(dice: DiceRoller) -> bool:
    total = n_d(dice, 3)
    marginal = total > MARGINAL_THRESHOLD
    logger.debug("marginal_atmosphere_rolled", total=total, marginal=marginal)
    return marginal


def roll_hydrographics(dice: DiceRoller, size: WorldSize) -> float:
    """Fraction of surface covered by liquid, capped at 1.0.

    Large worlds get a flat bonus before the cap is applied.
    """
    total = n_d(dice, 1)
    result = total * 0.1 + 0.35 + rand(dice) / 10
    if size == WorldSize.LARGE:
        result += LARGE_HYDROGRAPHICS_BONUS
    result = min(result, 1.0)
    logger.debug("hydrographics_rolled", total=total, hydrographics=result)
    return result


def roll_surface_temp(dice: DiceRoller) -> float:
    """Surface temperature in kelvin."""
    total = n_d(dice, 3)
    temp = (total - 3.5 + rand(dice)) * 6 + 250
    logger.debug("surface_temp_rolled", total=total, surface_temp=temp)
    return temp


def roll_absorption(dice: DiceRoller, hydrographics: float) -> float:
    """Absorption factor; wetter worlds absorb less."""
    base = lookup(ABSORPTION_BASE, hydrographics, ABSORPTION_BASE_DEFAULT)
    return base + rand(dice) / 10


def roll_blackbody(dice: DiceRoller) -> float:
    return 0.11 + rand(dice) / 10


def blackbody_correction(
    absorption: float, atmospheric_mass: float, blackbody: float
) -> float:
    """Factor converting surface temperature to blackbody temperature."""
    return absorption * (1 + atmospheric_mass * blackbody)


def roll_density(dice: DiceRoller) -> float:
    """Density relative to Earth."""
    total = n_d(dice, 3)
    density = lookup(DENSITY_BASE, total, DENSITY_BASE_DEFAULT) + rand(dice) / 10
    logger.debug("density_rolled", total=total, density=density)
    return density


def roll_gravity(
    dice: DiceRoller,
    size: WorldSize,
    blackbody_temp: float,
    density: float,
) -> float:
    """Surface gravity relative to Earth.

    Args:
        dice: Dice source.
        size: World size class, selects the coefficients.
        blackbody_temp: Blackbody temperature in kelvin.
        density: Density relative to Earth.

    Returns:
        Surface gravity in G.
    """
    total = n_d(dice, 2)
    roll = total - 2.5 + rand(dice)
    factor = math.sqrt(blackbody_temp * density)
    if size == WorldSize.STANDARD:
        gravity = (0.03 + roll * 0.0035) * factor
    else:
        gravity = (0.065 + roll * 0.0026) * factor
    logger.debug("gravity_rolled", total=total, gravity=gravity)
    return gravity


def roll_resources(dice: DiceRoller) -> int:
    total = n_d(dice, 3)
    resources = lookup(RESOURCES, total, RESOURCES_DEFAULT)
    logger.debug("resources_rolled", total=total, resources=resources)
    return resources


class WorldGenerator:
    """Rolls up garden worlds from an injected dice source."""

    def __init__(self, dice: DiceRoller):
        """Initialize WorldGenerator.

        Args:
            dice: Source of dice totals and fractions. Pass a seeded
                NumpyDice for reproducible worlds.
        """
        self.dice = dice

    def generate(self) -> GardenWorld:
        """Roll one world.

        Returns:
            Immutable GardenWorld snapshot.

        Raises:
            DiceContractError: If the dice source breaks its contract.
        """
        dice = self.dice

        size = roll_size(dice)
        atmospheric_mass = roll_atmospheric_mass(dice)
        marginal = roll_marginal_atmosphere(dice)
        hydrographics = roll_hydrographics(dice, size)
        surface_temp = roll_surface_temp(dice)
        absorption = roll_absorption(dice, hydrographics)
        blackbody = roll_blackbody(dice)
        blackbody_temp = surface_temp / blackbody_correction(
            absorption, atmospheric_mass, blackbody
        )
        density = roll_density(dice)
        gravity = roll_gravity(dice, size, blackbody_temp, density)
        resources = roll_resources(dice)

        world = GardenWorld(
            size=size,
            atmospheric_mass=atmospheric_mass,
            marginal_atmosphere=marginal,
            hydrographics=hydrographics,
            surface_temp=surface_temp,
            absorption=absorption,
            blackbody=blackbody,
            blackbody_temp=blackbody_temp,
            density=density,
            gravity=gravity,
            resources=resources,
        )

        logger.info(
            "world_generated",
            size=world.size.value,
            habitability=world.habitability,
            resources=world.resources,
        )
        return world


def generate_world(settings: GeneratorSettings | None = None) -> GardenWorld:
    """Generate a world using numpy dice seeded from settings.

    Args:
        settings: Generator settings. Defaults to an unseeded run.

    Returns:
        Generated GardenWorld.
    """
    settings = settings or GeneratorSettings()
    dice = NumpyDice.from_seed(settings.seed)
    return WorldGenerator(dice).generate()
