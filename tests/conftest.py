"""Shared pytest fixtures and configuration for the robot-sim test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no I/O.
* CLI tests write command files under ``tmp_path`` only.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from robot_sim.core.engine import Engine
from robot_sim.core.models import Board
from robot_sim.utils.constants import LOGGER_NAME


@pytest.fixture
def board() -> Board:
    """The default 5×5 tabletop."""
    return Board(width=5, height=5)


@pytest.fixture
def engine(board: Board) -> Engine:
    return Engine(board)


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo handler/level changes made by ``configure_logging``."""
    package_logger = logging.getLogger(LOGGER_NAME)
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate

