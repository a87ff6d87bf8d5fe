"""Custom exceptions for garden world generation."""


class GardenWorldError(Exception):
    """Base exception for garden world errors."""

    pass


class DiceContractError(GardenWorldError):
    """Raised when the dice source returns a value outside its contract."""

    pass
