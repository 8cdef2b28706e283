"""Core state-transition engine.

:class:`Engine` applies exactly one command to exactly one state and
returns a :class:`~robot_sim.core.models.StepOutcome`.  It depends on a
:class:`~robot_sim.core.models.Board` injected at construction time and
keeps no memory between calls; all continuity lives in the state the
caller passes back in.

Guarantees
----------
* Pure — no I/O, no logging, inputs are never mutated.
* Commands that cannot apply (before placement, off the board) are
  no-ops that return the input state unchanged, never exceptions.
* Only :class:`~robot_sim.exceptions.PreconditionError` escapes, and
  only for ``None`` arguments.
"""

from __future__ import annotations

from robot_sim.core.models import (
    Board,
    Command,
    Direction,
    Move,
    Place,
    Position,
    Report,
    RobotState,
    StepOutcome,
    TurnLeft,
    TurnRight,
)
from robot_sim.exceptions import PreconditionError

_STEP_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_LEFT_OF: dict[Direction, Direction] = {
    Direction.NORTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
}

_RIGHT_OF: dict[Direction, Direction] = {
    facing: turned for turned, facing in _LEFT_OF.items()
}


def format_report(position: Position, facing: Direction) -> str:
    """Render ``X,Y,FACING`` with the canonical uppercase facing name."""
    return f"{position.x},{position.y},{facing.name}"


class Engine:
    """Stateless interpreter for robot commands on a fixed board.

    Parameters
    ----------
    board:
        The tabletop bounds every placement and move is checked against.
    """

    def __init__(self, board: Board) -> None:
        self._board: Board = board

    @property
    def board(self) -> Board:
        return self._board

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, state: RobotState, command: Command) -> StepOutcome:
        """Apply *command* to *state*.

        Raises
        ------
        PreconditionError
            If *state* or *command* is ``None``.
        """
        if state is None:
            raise PreconditionError("Engine.execute() requires a state.")
        if command is None:
            raise PreconditionError("Engine.execute() requires a command.")

        if isinstance(command, Place):
            return self._place(state, command)
        if isinstance(command, Move):
            return self._move(state)
        if isinstance(command, TurnLeft):
            return self._turn(state, _LEFT_OF)
        if isinstance(command, TurnRight):
            return self._turn(state, _RIGHT_OF)
        if isinstance(command, Report):
            return self._report(state)
        # Unknown command objects are ignored.
        return StepOutcome(state)

    # ------------------------------------------------------------------
    # Per-command transitions
    # ------------------------------------------------------------------

    def _place(self, state: RobotState, command: Place) -> StepOutcome:
        target = Position(command.x, command.y)
        if not self._board.contains(target):
            return StepOutcome(state)
        return StepOutcome(RobotState(position=target, facing=command.facing))

    def _move(self, state: RobotState) -> StepOutcome:
        if state.position is None or state.facing is None:
            return StepOutcome(state)

        dx, dy = _STEP_VECTORS[state.facing]
        target = state.position.translated(dx, dy)
        if not self._board.contains(target):
            return StepOutcome(state)
        return StepOutcome(RobotState(position=target, facing=state.facing))

    @staticmethod
    def _turn(
        state: RobotState,
        rotation: dict[Direction, Direction],
    ) -> StepOutcome:
        if state.position is None or state.facing is None:
            return StepOutcome(state)
        return StepOutcome(
            RobotState(position=state.position, facing=rotation[state.facing]),
        )

    @staticmethod
    def _report(state: RobotState) -> StepOutcome:
        if state.position is None or state.facing is None:
            return StepOutcome(state)
        return StepOutcome(state, format_report(state.position, state.facing))
