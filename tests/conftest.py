"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from repo_governance.run_logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_project_logger() -> Iterator[None]:
    """Drop handlers installed by the CLI so later tests never write to closed streams."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
