"""Logging setup for Brief Factory.

All loggers live under the ``brief_factory`` namespace and render through
rich so log lines share the CLI console. Handlers are only installed by
setup_logging, which the CLI entry point calls.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "brief_factory"


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> None:
    """Configure the package logger. Safe to call more than once."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the package logger for a module name."""
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
