"""Core layer — pure parsing and state-transition logic.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Every transition returns new frozen values; nothing is mutated.
"""

from robot_sim.core.engine import Engine, format_report
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
from robot_sim.core.parser import try_parse
from robot_sim.core.simulation import Step, collect_reports, simulate

__all__: list[str] = [
    "Board",
    "Command",
    "Direction",
    "Engine",
    "Move",
    "Place",
    "Position",
    "Report",
    "RobotState",
    "Step",
    "StepOutcome",
    "TurnLeft",
    "TurnRight",
    "collect_reports",
    "format_report",
    "simulate",
    "try_parse",
]
