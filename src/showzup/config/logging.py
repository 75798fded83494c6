"""Logging setup for the ``showzup`` command."""

from __future__ import annotations

import logging
from typing import Final

RESOLUTION_LOGGER: Final[str] = "showzup.domain"


def configure_logging(
    *, level: int = logging.INFO, trace_resolution: bool = False, force: bool = False
) -> None:
    """Set up the root logger for CLI output.

    The resolver only logs candidate scoring at DEBUG. ``trace_resolution``
    lowers the ``showzup.domain`` logger to DEBUG while everything else stays
    at ``level``.
    """

    logging.basicConfig(level=level, format="%(levelname)-7s %(name)s: %(message)s", force=force)
    logging.getLogger(RESOLUTION_LOGGER).setLevel(logging.DEBUG if trace_resolution else logging.NOTSET)
