"""
log_setup.py - Colored console logging for the CLI and GUI entry points
"""

import logging

import colorlog

LOG_FORMAT = "(%(log_color)s%(levelname)s%(reset)s) %(message)s"

LOG_COLORS = {
    "DEBUG": "green",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(verbose: bool = False) -> None:
    """
    Install a colored handler on the root logger

    Args:
        verbose: Log DEBUG records too (default WARNING)
    """
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, log_colors=LOG_COLORS))

    root = logging.getLogger()
    # Replace handlers from a previous call
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
