"""Default values shared by the CLI and infrastructure layers."""

from __future__ import annotations

DEFAULT_BOARD_WIDTH: int = 5
"""Tabletop width used when ``--width`` is not given."""

DEFAULT_BOARD_HEIGHT: int = 5
"""Tabletop height used when ``--height`` is not given."""

DEFAULT_COMMAND_FILE: str = "commands.txt"
"""Command file read when no path is passed on the command line."""

STDIN_SOURCE: str = "-"
"""Command-source argument that means "read standard input"."""

LOGGER_NAME: str = "robot_sim"
"""Name of the package logger configured by :mod:`robot_sim.utils.log`."""
