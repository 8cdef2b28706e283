"""``--trace`` rendering — a per-line table of what the run did.

Each row shows the input line, how it was parsed, the robot state after
it, and the report it produced.  Rendered as a Rich table on stderr, or
as a fixed-width plain table when Rich is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from robot_sim.cli.console import console, rich_available
from robot_sim.core.engine import format_report
from robot_sim.core.models import (
    Command,
    Move,
    Place,
    Report,
    RobotState,
    TurnLeft,
    TurnRight,
)
from robot_sim.core.simulation import Step

UNPLACED_LABEL = "unplaced"
IGNORED_LABEL = "ignored"


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def describe_command(command: Command | None) -> str:
    """Render a parsed command in canonical keyword form."""
    if command is None:
        return IGNORED_LABEL
    if isinstance(command, Place):
        return f"PLACE {command.x},{command.y},{command.facing.name}"
    if isinstance(command, Move):
        return "MOVE"
    if isinstance(command, TurnLeft):
        return "LEFT"
    if isinstance(command, TurnRight):
        return "RIGHT"
    if isinstance(command, Report):
        return "REPORT"
    return type(command).__name__


def describe_state(state: RobotState) -> str:
    """``X,Y,FACING`` when placed, ``"unplaced"`` otherwise."""
    if state.position is None or state.facing is None:
        return UNPLACED_LABEL
    return format_report(state.position, state.facing)


def _rows(steps: Sequence[Step]) -> list[tuple[str, str, str, str, str]]:
    return [
        (
            str(step.line_number),
            step.line.strip(),
            describe_command(step.command),
            describe_state(step.outcome.state),
            step.report or "",
        )
        for step in steps
    ]


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def _print_plain_trace_table(rows: list[tuple[str, str, str, str, str]]) -> None:
    """Render the trace without Rich."""
    print("\nrobot-sim trace", file=sys.stderr)
    print("=" * 78, file=sys.stderr)
    print(
        f"{'#':>4} {'Input':<24} {'Command':<20} {'State':<14} {'Output':<12}",
        file=sys.stderr,
    )
    print("-" * 78, file=sys.stderr)
    for number, line, command, state, output in rows:
        print(
            f"{number:>4} {line:<24} {command:<20} {state:<14} {output:<12}",
            file=sys.stderr,
        )
    print(file=sys.stderr)


def _print_rich_trace_table(rows: list[tuple[str, str, str, str, str]]) -> None:
    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title="robot-sim trace",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Input", min_width=12)
    table.add_column("Command", min_width=10)
    table.add_column("State", min_width=10)
    table.add_column("Output", style="bold green", min_width=8)

    for number, line, command, state, output in rows:
        command_cell = (
            f"[yellow]{command}[/yellow]" if command == IGNORED_LABEL else command
        )
        table.add_row(number, escape(line), command_cell, state, output)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render_trace(steps: Sequence[Step]) -> None:
    """Print a table describing every step of a run to stderr."""
    rows = _rows(steps)
    if rich_available():
        _print_rich_trace_table(rows)
    else:
        _print_plain_trace_table(rows)
