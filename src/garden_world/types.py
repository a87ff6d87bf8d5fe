"""Core types for garden world generation."""

from pydantic import BaseModel, ConfigDict, Field

from . import habitability as _derived
from .sizes import WorldSize

__all__ = ["GardenWorld", "WorldSize"]


class GardenWorld(BaseModel):
    """Immutable snapshot of a generated garden world.

    Every field is set once by the generator. Atmospheric pressure and
    habitability are derived on each access and never stored.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    size: WorldSize
    atmospheric_mass: float
    marginal_atmosphere: bool
    hydrographics: float = Field(ge=0.0, le=1.0)
    surface_temp: float
    absorption: float
    blackbody: float
    blackbody_temp: float
    density: float
    gravity: float
    resources: int = Field(ge=-2, le=2)

    @property
    def atmospheric_pressure(self) -> float:
        return _derived.atmospheric_pressure(self)

    @property
    def habitability(self) -> int:
        return _derived.habitability(self)
