"""Generator configuration loading from TOML files."""

import tomllib
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from pydantic import BaseModel, Field


class GeneratorSettings(BaseModel):
    """World generator settings."""

    seed: int | None = Field(
        default=None, description="Random seed (None = fresh OS entropy)"
    )


class LoggingSettings(BaseModel):
    """Logging settings."""

    verbose: bool = Field(default=False, description="Log each roll at debug level")


class Config(BaseModel):
    """Complete configuration for a generation run."""

    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_config(config_path: Path | Traversable) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file, on disk or shipped
            inside the package.

    Returns:
        Parsed Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
    """
    with config_path.open("rb") as f:
        data = tomllib.load(f)
    return Config.model_validate(data)


def find_config(name: str) -> Path | Traversable:
    """Resolve a config by file path or by shipped config name.

    Anything that looks like a path (contains a separator or ends in
    ``.toml``) must exist on disk. Otherwise ``name`` is looked up among
    the configs bundled in ``garden_world/configs``.

    Raises:
        FileNotFoundError: If no matching config exists.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.is_file():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    shipped = _shipped_configs().get(name)
    if shipped is None:
        raise FileNotFoundError(
            f"No shipped config named '{name}'. "
            f"Available configs: {list_configs()}"
        )
    return shipped


def list_configs() -> list[str]:
    """Names of the configs bundled with the package."""
    return sorted(_shipped_configs())


def _shipped_configs() -> dict[str, Traversable]:
    configs = resources.files("garden_world").joinpath("configs")
    if not configs.is_dir():
        return {}
    return {
        entry.name.removesuffix(".toml"): entry
        for entry in configs.iterdir()
        if entry.is_file() and entry.name.endswith(".toml")
    }
