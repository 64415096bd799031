"""Logging helpers for pageenv."""

from __future__ import annotations

import logging
from typing import Literal

Verbosity = Literal["quiet", "normal", "verbose"]

_LEVEL_BY_VERBOSITY: dict[Verbosity, int] = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


def level_for(verbosity: str) -> int:
    return _LEVEL_BY_VERBOSITY.get(verbosity, logging.INFO)  # type: ignore[call-overload]


def configure_logging(verbosity: Verbosity = "normal") -> None:
    """Configure root logging for a classification session.

    Repeated calls only adjust the root level so a long-lived host can switch
    between quiet and verbose output without stacking handlers.
    """

    level = level_for(verbosity)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
    else:
        logging.basicConfig(
            level=level,
            format="[%(levelname).1s] %(message)s",
        )
    logging.debug("Logging configured with level %s", logging.getLevelName(level))
