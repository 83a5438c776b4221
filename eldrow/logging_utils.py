"""
Logging setup shared by the eldrow package.

Everything logs under the "eldrow" logger so the CLI can route diagnostics to
stderr and keep stdout for the reconstructed paths.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "eldrow"


def get_logger(name: str | None = None) -> logging.Logger:
    """Package logger, or a child of it (e.g. get_logger("solvers"))."""
    return logging.getLogger(LOGGER_NAME if not name else f"{LOGGER_NAME}.{name}")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Point the package logger at the current stderr.

    INFO by default, DEBUG when verbose (solver trace lines). Calling it again
    replaces the previous handler instead of stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
