"""CLI application entry point for robot-sim.

This module is the **sole error boundary** for the entire application.
It catches :class:`~robot_sim.exceptions.RobotSimError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing and state transitions are
  delegated to the core layer, file reading to the infrastructure layer.
* stdout carries report lines only; everything else goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import structlog

from robot_sim.cli import exit_codes
from robot_sim.cli.console import console
from robot_sim.core.engine import Engine
from robot_sim.core.models import Board
from robot_sim.core.simulation import Step, simulate
from robot_sim.exceptions import RobotSimError
from robot_sim.infra.command_source import read_command_lines
from robot_sim.utils.constants import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_COMMAND_FILE,
    LOGGER_NAME,
)
from robot_sim.utils.log import configure_logging
from robot_sim.version import __version__

log = structlog.get_logger(f"{LOGGER_NAME}.cli")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``robot-sim [commands.txt]`` — run a command file
    * ``robot-sim -``              — read commands from stdin
    * ``robot-sim --version``
    """
    parser = argparse.ArgumentParser(
        prog="robot-sim",
        description="Drive a simulated robot around a tabletop grid.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "commands",
        nargs="?",
        default=DEFAULT_COMMAND_FILE,
        help=(
            "Command file to run, or '-' for stdin "
            f"(default: {DEFAULT_COMMAND_FILE})."
        ),
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_BOARD_WIDTH,
        help=f"Board width in cells (default: {DEFAULT_BOARD_WIDTH}).",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_BOARD_HEIGHT,
        help=f"Board height in cells (default: {DEFAULT_BOARD_HEIGHT}).",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print a table of every command and the resulting state to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each command to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------

def _log_step(step: Step) -> None:
    if step.command is None:
        log.debug("command.ignored", line_number=step.line_number, line=step.line)
        return
    log.debug(
        "command.applied",
        line_number=step.line_number,
        command=type(step.command).__name__,
        placed=step.outcome.state.is_placed,
    )


def _handle_run(
    source: str,
    board: Board,
    *,
    trace: bool = False,
) -> int:
    """Run every line of *source* and print reports to stdout."""
    lines = read_command_lines(source)
    engine = Engine(board)

    steps: list[Step] = []
    report_count = 0
    for step in simulate(engine, lines):
        _log_step(step)
        steps.append(step)
        if step.report is not None:
            report_count += 1
            print(step.report, flush=True)

    log.debug(
        "run.complete",
        lines=len(steps),
        ignored=sum(1 for step in steps if not step.accepted),
        reports=report_count,
    )

    if trace:
        from robot_sim.cli.trace import render_trace

        render_trace(steps)

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the robot-sim CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    board = Board(width=args.width, height=args.height)
    return _handle_run(args.commands, board, trace=args.trace)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RobotSimError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
