"""Finite State Machine for simulation run phases."""

from enum import Enum
from typing import Optional, Set, Callable


class SimState(Enum):
    """States of a simulation run."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GOAL_REACHED = "goal_reached"
    OUT_OF_STEPS = "out_of_steps"


class SimStateMachine:
    """
    Finite State Machine for managing simulation run states.

    State Transitions:
    IDLE -> RUNNING (when the run starts)
    RUNNING -> PAUSED (when paused)
    RUNNING -> GOAL_REACHED (when the robot reaches the target)
    RUNNING -> OUT_OF_STEPS (when the step budget is used up)
    PAUSED -> RUNNING (when resumed)
    PAUSED -> IDLE (when reset)
    GOAL_REACHED -> IDLE (when reset)
    OUT_OF_STEPS -> IDLE (when reset)
    """

    def __init__(self):
        self._current_state = SimState.IDLE
        self._state_callbacks = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> dict[SimState, Set[SimState]]:
        """Build the valid state transition map."""
        return {
            SimState.IDLE: {SimState.RUNNING},
            SimState.RUNNING: {SimState.PAUSED, SimState.GOAL_REACHED, SimState.OUT_OF_STEPS},
            SimState.PAUSED: {SimState.RUNNING, SimState.IDLE},
            SimState.GOAL_REACHED: {SimState.IDLE},
            SimState.OUT_OF_STEPS: {SimState.IDLE},
        }

    @property
    def current_state(self) -> SimState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: SimState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: SimState, context: Optional[dict] = None) -> bool:
        """
        Attempt to transition to the target state.

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)

        return True

    def on_state_enter(self, state: SimState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    def is_running(self) -> bool:
        return self._current_state == SimState.RUNNING

    def is_paused(self) -> bool:
        return self._current_state == SimState.PAUSED

    def is_finished(self) -> bool:
        """Check if the run has finished (goal reached or out of steps)."""
        return self._current_state in [SimState.GOAL_REACHED, SimState.OUT_OF_STEPS]

    def start(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(SimState.RUNNING, context)

    def pause(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(SimState.PAUSED, context)

    def resume(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(SimState.RUNNING, context)

    def reach_goal(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(SimState.GOAL_REACHED, context)

    def run_out_of_steps(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(SimState.OUT_OF_STEPS, context)

    def reset_to_idle(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(SimState.IDLE, context)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            SimState.IDLE: "Ready to start",
            SimState.RUNNING: "Simulation running",
            SimState.PAUSED: "Simulation paused",
            SimState.GOAL_REACHED: "Goal reached",
            SimState.OUT_OF_STEPS: "Step budget exhausted",
        }
        return descriptions.get(self._current_state, "Unknown state")
