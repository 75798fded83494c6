from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from showzup.config import RESOLUTION_LOGGER, configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def restore_resolution_logger() -> Iterator[None]:
    resolution_logger = logging.getLogger(RESOLUTION_LOGGER)
    level = resolution_logger.level
    yield
    resolution_logger.setLevel(level)


def test_trace_resolution_lowers_only_the_domain_logger() -> None:
    configure_logging(level=logging.WARNING, trace_resolution=True)

    assert logging.getLogger("showzup.domain.resolver").isEnabledFor(logging.DEBUG)
    assert logging.getLogger(RESOLUTION_LOGGER).level == logging.DEBUG
    assert logging.getLogger("showzup.ui.cli").level == logging.NOTSET


def test_without_trace_the_domain_logger_inherits_the_root_level() -> None:
    configure_logging(trace_resolution=True)
    configure_logging()

    assert logging.getLogger(RESOLUTION_LOGGER).level == logging.NOTSET
