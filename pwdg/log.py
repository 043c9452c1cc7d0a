"""Logging setup for the pwdg command line and API."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(log_level: str = "WARNING") -> None:
    """
    Route the root logger through rich on stderr.

    Args:
        log_level: level name, e.g. "DEBUG". Unknown names fall back to WARNING.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # drop handlers from an earlier call
    root_logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
