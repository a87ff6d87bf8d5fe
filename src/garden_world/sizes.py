"""World size classes."""

from enum import Enum


class WorldSize(str, Enum):
    """World size class rolled at generation time."""

    STANDARD = "standard"
    LARGE = "large"

    @property
    def label(self) -> str:
        """Capitalized name used in rendered output."""
        return self.value.capitalize()
