"""Line-by-line driver over the parser and engine.

:func:`simulate` threads a :class:`~robot_sim.core.models.RobotState`
through a sequence of raw command lines and yields one :class:`Step` per
line, accepted or not.  Rejected lines leave the state untouched, so a
caller that only wants the reports can use :func:`collect_reports`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from robot_sim.core.engine import Engine
from robot_sim.core.models import Command, RobotState, StepOutcome
from robot_sim.core.parser import try_parse


@dataclass(frozen=True, slots=True)
class Step:
    """What happened to one input line."""

    line_number: int
    """1-based position of the line in the input."""

    line: str
    """The raw line as read."""

    command: Command | None
    """Parsed command, or ``None`` when the line was rejected."""

    outcome: StepOutcome
    """State after this line and any report it produced."""

    @property
    def accepted(self) -> bool:
        return self.command is not None

    @property
    def report(self) -> str | None:
        return self.outcome.report


def simulate(
    engine: Engine,
    lines: Iterable[str],
    state: RobotState | None = None,
) -> Iterator[Step]:
    """Parse and execute *lines* in order, yielding a :class:`Step` each.

    Starts from :meth:`RobotState.initial` unless *state* is given.
    """
    current = state if state is not None else RobotState.initial()
    for line_number, line in enumerate(lines, start=1):
        command = try_parse(line)
        if command is None:
            outcome = StepOutcome(current)
        else:
            outcome = engine.execute(current, command)
        current = outcome.state
        yield Step(
            line_number=line_number,
            line=line,
            command=command,
            outcome=outcome,
        )


def collect_reports(engine: Engine, lines: Iterable[str]) -> list[str]:
    """Run *lines* from the initial state and return every report, in order."""
    return [
        step.report
        for step in simulate(engine, lines)
        if step.report is not None
    ]
