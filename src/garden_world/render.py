"""Human-readable rendering of a generated world."""

from decimal import ROUND_HALF_UP, Decimal

from .types import GardenWorld


def fixed(value: float, places: int) -> str:
    """Format with ``places`` decimals, rounding halves away from zero.

    Plain ``format`` rounds halves to even, so 288.5 would print as 288.
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def render(world: GardenWorld) -> str:
    """Format world statistics, one ``Label: value`` line per field."""
    lines = [
        f"Size: {world.size.label}",
        f"Atmospheric Mass: {fixed(world.atmospheric_mass, 2)}",
        f"Marginal Atmosphere?: {str(world.marginal_atmosphere).lower()}",
        f"Hydrographic Coverage: {fixed(world.hydrographics, 2)}",
        f"Surface Temperature: {fixed(world.surface_temp, 0)}",
        f"Blackbody Temperature: {fixed(world.blackbody_temp, 0)}",
        f"Surface Gravity: {fixed(world.gravity, 2)}",
        f"Atmospheric Pressure: {fixed(world.atmospheric_pressure, 2)}",
        f"Resources: {world.resources}",
        f"Habitability: {world.habitability}",
    ]
    return "\n".join(lines)
