"""Console logging setup for the countdown demos."""
from __future__ import annotations

import logging

from colorlog import ColoredFormatter

_FORMAT = (
    "%(green)s%(asctime)s%(reset)s[%(blue)s%(name)s%(reset)s] - "
    "%(log_color)s%(levelname)s%(reset)s - %(message)s"
)

_LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(level: int | str = logging.INFO) -> logging.Handler:
    """Install a colored console handler on the root logger.

    Existing root handlers are removed, so calling this twice does not
    duplicate output. Returns the installed handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if root_logger.handlers:
        root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter(
            _FORMAT,
            log_colors=_LOG_COLORS,
        )
    )
    root_logger.addHandler(handler)
    return handler