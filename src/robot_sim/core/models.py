"""Domain models for robot-sim.

All models are **frozen** dataclasses — immutable value objects.  A
state transition never edits a model in place; it builds a new one.
They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from robot_sim.exceptions import InvalidBoardError, PreconditionError


# ---------------------------------------------------------------------------
# Facing
# ---------------------------------------------------------------------------

class Direction(enum.Enum):
    """Cardinal direction the robot is facing.

    The member *name* is the canonical uppercase spelling used in
    reports.  Declaration order is clockwise, starting at north.
    """

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Position:
    """Integer grid coordinate; ``(0, 0)`` is the south-west corner."""

    x: int
    y: int

    def translated(self, dx: int, dy: int) -> Position:
        """Return a new position offset by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True, slots=True)
class Board:
    """Rectangular tabletop covering ``[0, width) × [0, height)``.

    Raises
    ------
    InvalidBoardError
        If either dimension is not a positive integer.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if not _is_positive_int(self.width) or not _is_positive_int(self.height):
            raise InvalidBoardError(
                f"Board dimensions must be positive integers, "
                f"got {self.width!r}x{self.height!r}.",
                hint="Use --width and --height values of 1 or more.",
            )

    def contains(self, position: Position) -> bool:
        """Return ``True`` when *position* lies on the board."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height


# ---------------------------------------------------------------------------
# Robot state
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RobotState:
    """Where the robot is and which way it faces, if it has been placed.

    Both fields are ``None`` until the first valid placement and both
    are set afterwards.  A state with only one of them set cannot be
    constructed.
    """

    position: Position | None = None
    facing: Direction | None = None

    def __post_init__(self) -> None:
        if (self.position is None) != (self.facing is None):
            raise PreconditionError(
                "RobotState needs both position and facing, or neither.",
            )

    @property
    def is_placed(self) -> bool:
        return self.position is not None and self.facing is not None

    @classmethod
    def initial(cls) -> RobotState:
        """Return the unplaced starting state."""
        return cls()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Place:
    """Put the robot at ``(x, y)`` facing *facing*."""

    x: int
    y: int
    facing: Direction


@dataclass(frozen=True, slots=True)
class Move:
    """Step one unit forward."""


@dataclass(frozen=True, slots=True)
class TurnLeft:
    """Rotate 90° counter-clockwise."""


@dataclass(frozen=True, slots=True)
class TurnRight:
    """Rotate 90° clockwise."""


@dataclass(frozen=True, slots=True)
class Report:
    """Announce the current position and facing."""


Command = Union[Place, Move, TurnLeft, TurnRight, Report]
"""Closed set of commands the parser can produce."""


# ---------------------------------------------------------------------------
# Engine result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StepOutcome:
    """State after one command, plus the report line it produced (if any)."""

    state: RobotState
    report: str | None = None
