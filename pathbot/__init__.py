"""Grid robot navigation - replans a shortest path with A* on every time-step.

The robot asks the planner for exactly one move per step; nothing is cached
between steps, so changes to the world are picked up immediately.
"""

from .domain.types import Position, TileStatus, Action
from .domain.world import GridWorld, GridWorldView
from .domain.planner import PathPlanner, plan_next_action
from .domain.robot import Robot

__version__ = "1.0.0"

__all__ = [
    "Position",
    "TileStatus",
    "Action",
    "GridWorld",
    "GridWorldView",
    "PathPlanner",
    "plan_next_action",
    "Robot",
]
