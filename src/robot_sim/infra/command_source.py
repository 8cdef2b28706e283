"""Infrastructure: load command lines from a file or standard input.

The whole source is read up front and split into lines without their
terminators, so the parser never sees an embedded newline.  Only
``\r\n``, ``\r`` and ``\n`` end a line.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import TextIO

from robot_sim.exceptions import CommandSourceError
from robot_sim.utils.constants import STDIN_SOURCE

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_command_lines(
    source: str | Path,
    *,
    stdin: TextIO | None = None,
) -> list[str]:
    """Return every line of *source*.

    Parameters
    ----------
    source:
        Path to a UTF-8 command file, or ``"-"`` for standard input.
    stdin:
        Stream used when *source* is ``"-"``.  Defaults to
        :data:`sys.stdin`.

    Raises
    ------
    CommandSourceError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    if str(source) == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        return _read_stream(stream)

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise CommandSourceError(
            f"Command file '{path}' not found.",
            hint="Pass a path to an existing file, or '-' to read stdin.",
        ) from exc
    except IsADirectoryError as exc:
        raise CommandSourceError(
            f"Command source '{path}' is a directory, not a file.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandSourceError(
            f"Command file '{path}' is not valid UTF-8.",
            hint="Save the file with UTF-8 encoding and try again.",
        ) from exc
    except OSError as exc:
        raise CommandSourceError(
            f"Could not read command file '{path}': {exc.strerror or exc}",
        ) from exc
    return _split_lines(text)


def _read_stream(stream: TextIO) -> list[str]:
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        raise CommandSourceError(
            "Standard input is not valid UTF-8.",
        ) from exc
    except OSError as exc:
        raise CommandSourceError(
            f"Could not read standard input: {exc}",
        ) from exc
    return _split_lines(text)


def _split_lines(text: str) -> list[str]:
    """Split on ``\\r\\n``, ``\\r`` and ``\\n`` only.

    Form feeds, vertical tabs and Unicode line separators stay inside
    the line they appear in.  A trailing terminator does not add an
    empty final line.
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines
