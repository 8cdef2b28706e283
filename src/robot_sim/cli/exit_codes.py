"""Exit-code constants used by the CLI layer.

Ignored commands are never failures: a run that skips every line still
exits with :data:`SUCCESS`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Run completed.  Invalid commands do not change this."""

GENERAL_ERROR: int = 1
"""A known RobotSimError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
