"""Custom exception hierarchy for robot-sim.

Invalid *commands* are never exceptions: the parser rejects them by
returning ``None`` and the engine treats off-board or pre-placement
commands as no-ops.  The classes below cover the other tier, errors in
the calling code or its configuration, which must fail loudly.

Raw OS-level exceptions must NEVER propagate beyond the infrastructure
layer.  They are caught there and re-raised as a typed subclass defined
here.

Hierarchy
---------
RobotSimError
├── InvalidBoardError      (also a ValueError)
├── PreconditionError      (also a TypeError)
└── CommandSourceError
"""

from __future__ import annotations


class RobotSimError(Exception):
    """Base exception for all robot-sim errors.

    The CLI error boundary renders any subclass as a clean message,
    followed by :attr:`hint` when one is set.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class InvalidBoardError(RobotSimError, ValueError):
    """Raised when a board is constructed with non-positive dimensions."""


# --- Programmer errors -----------------------------------------------------

class PreconditionError(RobotSimError, TypeError):
    """Raised when a core operation receives an absent or inconsistent value.

    Examples: ``Engine.execute(None, Move())`` or a ``RobotState`` with a
    position but no facing.
    """


# --- Command input ---------------------------------------------------------

class CommandSourceError(RobotSimError):
    """Raised when the command file cannot be found, read, or decoded."""
