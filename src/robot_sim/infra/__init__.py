"""Infrastructure layer — reading command lines from the outside world.

Every raw OS or decoding exception must be caught here and re-raised as
a :class:`~robot_sim.exceptions.RobotSimError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from robot_sim.infra.command_source import read_command_lines

__all__: list[str] = ["read_command_lines"]
