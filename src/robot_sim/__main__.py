"""Allow ``python -m robot_sim`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m robot_sim`` behaves identically to the ``robot-sim``
console script.
"""

from __future__ import annotations

from robot_sim.cli.app import cli

if __name__ == "__main__":
    cli()
