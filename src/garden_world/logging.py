"""structlog setup for command-line runs."""

import sys

import structlog

# stdlib logging level numbers
DEBUG = 10
INFO = 20


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog to write to stderr.

    Stdout is left for the rendered world.

    Args:
        verbose: Log every roll at debug level.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(DEBUG if verbose else INFO),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
