"""Robot agent that picks one action per time-step."""

from typing import Optional
from .types import Action
from .world import GridWorldView
from .planner import PathPlanner


class Robot:
    """Agent that replans toward the world's target on every time-step."""

    def __init__(self, world: GridWorldView, planner: Optional[PathPlanner] = None):
        self.world = world
        self.planner = planner or PathPlanner()

    def decide_action(self) -> Action:
        """Decide the action for the current time-step."""
        start = self.world.current_position()
        target = self.world.target_position()
        return self.planner.plan(start, target, self.world)
