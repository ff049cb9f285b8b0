"""CLI interface logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from config import get_config


def setup_verbose_logging() -> None:
    """Set up logging for verbose mode using rich for pretty output."""
    root_logger = logging.getLogger()
    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    runtime = get_config().runtime
    level = (
        logging.DEBUG
        if runtime.debug
        else logging.getLevelName(runtime.log_level.upper())
    )
    if not isinstance(level, int):
        level = logging.INFO
    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    rich_handler.setLevel(level)

    root_logger.addHandler(rich_handler)
    root_logger.setLevel(level)

    for name in ("valet", "config"):
        logging.getLogger(name).setLevel(level)
