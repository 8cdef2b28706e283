"""Text → command parsing.

Every function in this module is a **pure** transformation.  Malformed
input is not an error: :func:`try_parse` returns ``None`` and the caller
simply skips the line.

Grammar (keywords and direction names are case-insensitive)::

    MOVE | LEFT | RIGHT | REPORT
    PLACE <sep> X , Y , F        sep = one or more spaces / tabs

Case folding is ASCII-only so the result never depends on the locale
or on Unicode special-casing rules.
"""

from __future__ import annotations

import re

from robot_sim.core.models import (
    Command,
    Direction,
    Move,
    Place,
    Report,
    TurnLeft,
    TurnRight,
)

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)

_INTEGER = re.compile(r"[+-]?[0-9]+")

_SEPARATORS = " \t"

_PLACE_KEYWORD = "PLACE"

_SIMPLE_COMMANDS: dict[str, Command] = {
    "MOVE": Move(),
    "LEFT": TurnLeft(),
    "RIGHT": TurnRight(),
    "REPORT": Report(),
}

_DIRECTIONS: dict[str, Direction] = {
    direction.name: direction for direction in Direction
}


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------

def _fold(text: str) -> str:
    """Uppercase ASCII letters only; leave every other character alone."""
    return text.translate(_ASCII_UPPER)


def _is_integer(token: str) -> bool:
    return _INTEGER.fullmatch(token.strip()) is not None


def _parse_int(token: str) -> int | None:
    """Parse a signed base-10 integer made of ASCII digits.

    Tokens too long for int/str conversion are rejected like any other
    malformed number.
    """
    if not _is_integer(token):
        return None
    try:
        return int(token.strip())
    except ValueError:
        return None


def _parse_direction(token: str) -> Direction | None:
    """Map a direction name to :class:`Direction`.

    Numeric tokens are rejected outright, even though they look like
    enum ordinals.
    """
    token = token.strip()
    if _is_integer(token):
        return None
    return _DIRECTIONS.get(_fold(token))


# ---------------------------------------------------------------------------
# PLACE arguments
# ---------------------------------------------------------------------------

def _parse_place_arguments(arguments: str) -> Place | None:
    """Parse the ``X,Y,F`` part of a PLACE line."""
    fields = arguments.split(",")
    if len(fields) != 3:
        return None

    x = _parse_int(fields[0])
    y = _parse_int(fields[1])
    facing = _parse_direction(fields[2])
    if x is None or y is None or facing is None:
        return None

    return Place(x=x, y=y, facing=facing)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def try_parse(line: str | None) -> Command | None:
    """Convert one line of text into a :data:`Command`.

    Returns ``None`` for empty, whitespace-only, unknown, or malformed
    lines.  Never raises for bad input.
    """
    if not line:
        return None

    trimmed = line.strip()
    if not trimmed:
        return None

    folded = _fold(trimmed)

    simple = _SIMPLE_COMMANDS.get(folded)
    if simple is not None:
        return simple

    keyword_length = len(_PLACE_KEYWORD)
    if (
        folded.startswith(_PLACE_KEYWORD)
        and len(folded) > keyword_length
        and folded[keyword_length] in _SEPARATORS
    ):
        return _parse_place_arguments(trimmed[keyword_length:].strip())

    return None
