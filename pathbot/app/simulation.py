"""Headless time-step loop that drives a robot through a grid world."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.types import Action, Position
from ..domain.world import GridWorld
from ..domain.robot import Robot
from .fsm import SimStateMachine, SimState

logger = logging.getLogger(__name__)


@dataclass
class StepRecord:
    """What happened during one time-step."""
    step: int
    action: Action
    position: Position
    crashed: bool = False


@dataclass
class SimulationResult:
    """Outcome of a finished simulation run."""
    goal_reached: bool
    steps: int
    final_position: Position
    actions: List[Action] = field(default_factory=list)
    crashes: int = 0


class Simulation:
    """
    Runs the robot one time-step at a time until it reaches the target or
    the step budget is used up.

    Each step the robot plans from scratch against the current world. A fault
    raised while deciding is logged and treated as DO_NOTHING for that step.
    """

    def __init__(self, world: GridWorld, robot: Optional[Robot] = None,
                 iterations: int = 200, debug: bool = True):
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")

        self.world = world
        self.robot = robot or Robot(world)
        self.iterations = iterations
        self.debug = debug

        self._state_machine = SimStateMachine()
        self._step_count = 0
        self._actions: List[Action] = []
        self._crashes = 0

    @property
    def state(self) -> SimState:
        return self._state_machine.current_state

    @property
    def state_machine(self) -> SimStateMachine:
        return self._state_machine

    @property
    def step_count(self) -> int:
        return self._step_count

    def is_finished(self) -> bool:
        return self._state_machine.is_finished()

    def step(self) -> StepRecord:
        """Advance the simulation by one time-step."""
        if self._state_machine.is_finished():
            raise RuntimeError("Simulation has already finished")
        if self._state_machine.is_paused():
            raise RuntimeError("Simulation is paused")
        if self._state_machine.current_state == SimState.IDLE:
            self._state_machine.start()

        crashed = False
        try:
            action = self.robot.decide_action()
        except Exception as e:
            crashed = True
            self._crashes += 1
            action = Action.DO_NOTHING
            level = logging.ERROR if self.debug else logging.DEBUG
            logger.log(level, "[ERROR AGENT CRASH AT TIME STEP %03d] %s", self._step_count, e)

        position = self.world.apply_action(action)
        self._actions.append(action)
        self._step_count += 1
        logger.debug("Step %d: %s -> %s", self._step_count, action.name, position)

        if self.world.goal_condition_met():
            logger.info("Goal Condition was met in %02d steps!", self._step_count)
            self._state_machine.reach_goal({"steps": self._step_count})
        elif self._step_count >= self.iterations:
            logger.info("Goal Condition was not met after %02d steps...", self._step_count)
            self._state_machine.run_out_of_steps({"steps": self._step_count})

        return StepRecord(self._step_count, action, position, crashed)

    def run(self) -> SimulationResult:
        """Step until the run finishes and return its outcome."""
        while not self._state_machine.is_finished():
            self.step()
        return self.result()

    def result(self) -> SimulationResult:
        """Get the outcome of the run so far."""
        return SimulationResult(
            goal_reached=self._state_machine.current_state == SimState.GOAL_REACHED,
            steps=self._step_count,
            final_position=self.world.current_position(),
            actions=list(self._actions),
            crashes=self._crashes,
        )
