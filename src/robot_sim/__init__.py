"""robot-sim — command interpreter for a robot on a bounded tabletop grid.

A pure parser + state-transition engine wrapped by a thin CLI driver.
"""

from robot_sim.version import __version__

__all__: list[str] = ["__version__"]
