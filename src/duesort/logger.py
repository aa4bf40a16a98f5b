"""The ``duesort`` logger.

Output is plain text on stderr, one line per event. How much appears is
chosen by the CLI's ``-v`` count:

    0  errors
    1  each task as it enters the order, rejected requests, late-task warnings
    2  validator checks as well
    3  everything, including heap pushes and graph sizes
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

CHANGES_LEVEL = 25
CHECKS_LEVEL = 15

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0
VERBOSITY_CHANGES = 1
VERBOSITY_CHECKS = 2
VERBOSITY_DEBUG = 3

_LEVELS = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_CHANGES: CHANGES_LEVEL,
    VERBOSITY_CHECKS: CHECKS_LEVEL,
    VERBOSITY_DEBUG: logging.DEBUG,
}

LOGGER_NAME = "duesort"


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count onto a logging level; anything unknown means errors only."""
    return _LEVELS.get(verbosity, logging.ERROR)


class DuesortLogger(logging.Logger):
    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> DuesortLogger:
    logging.setLoggerClass(DuesortLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, DuesortLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Route duesort output to ``stream`` (stderr by default) at ``verbosity``.

    Any handler from an earlier call is removed first, so the CLI and tests
    can switch streams freely. Records do not reach the root logger.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(level_for_verbosity(verbosity))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def debug_enabled() -> bool:
    return get_logger().isEnabledFor(logging.DEBUG)
