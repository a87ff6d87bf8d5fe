"""Command-line interface for garden world generation."""

import argparse

import structlog

from .config import Config, find_config, load_config
from .generator import generate_world
from .logging import configure_logging
from .render import render


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: roll one garden world and print its statistics."""
    parser = argparse.ArgumentParser(
        description="Generate a GURPS garden world and print its statistics"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of generator TOML config file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log every roll"
    )

    args = parser.parse_args(argv)

    if args.config:
        configure_logging(args.verbose)
        try:
            config = load_config(find_config(args.config))
        except FileNotFoundError as e:
            structlog.get_logger().error("config_not_found", error=str(e))
            raise SystemExit(1)
    else:
        config = Config()

    # Apply CLI overrides
    if args.seed is not None:
        config.generator.seed = args.seed
    if args.verbose:
        config.logging.verbose = True

    configure_logging(config.logging.verbose)
    logger = structlog.get_logger()
    logger.debug("config_resolved", seed=config.generator.seed)

    world = generate_world(config.generator)
    print(render(world))


if __name__ == "__main__":
    main()
