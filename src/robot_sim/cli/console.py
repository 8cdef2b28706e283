"""Stderr console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.  Reports never go through this
console; they are written to stdout by :mod:`robot_sim.cli.app`.
"""

from __future__ import annotations

import sys
from typing import Any


def rich_available() -> bool:
	"""Return ``True`` when ``rich.console`` can be imported."""
	try:
		import rich.console  # noqa: F401
	except ModuleNotFoundError:
		return False
	return True


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	from rich.console import Console

	return Console(stderr=True, highlight=False, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		if not rich_available():
			print(*objects, file=sys.stderr)
			return
		get_rich_console().print(*objects)


console = _ConsoleProxy()
