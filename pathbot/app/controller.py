"""Timer-driven controller that runs a simulation one tick at a time."""

import logging
from typing import Optional
from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.world import GridWorld
from ..utils.config import SimulationConfig
from .simulation import Simulation
from .fsm import SimState

logger = logging.getLogger(__name__)


class SimulationController(QObject):
    """
    Controller that advances a Simulation on each QTimer tick.

    Signals:
        step_completed: Emitted after each time-step with its StepRecord
        state_changed: Emitted when the run state changes
        simulation_finished: Emitted once with the SimulationResult
    """

    # Qt Signals
    step_completed = Signal(object)  # StepRecord
    state_changed = Signal(object)  # SimState
    simulation_finished = Signal(object)  # SimulationResult

    def __init__(self, world: GridWorld, config: Optional[SimulationConfig] = None):
        super().__init__()

        self._config = config or SimulationConfig()
        self._simulation = self._create_simulation(world)

        # Timer for run mode
        self._timer = QTimer(self)
        self._timer.setInterval(self._config.delay_ms)
        self._timer.timeout.connect(self._on_timer_tick)

    def _create_simulation(self, world: GridWorld) -> Simulation:
        simulation = Simulation(
            world, iterations=self._config.iterations, debug=self._config.debug
        )
        machine = simulation.state_machine
        machine.on_state_enter(SimState.RUNNING, self._on_running_entered)
        machine.on_state_enter(SimState.PAUSED, self._on_paused_entered)
        machine.on_state_enter(SimState.IDLE, self._on_idle_entered)
        machine.on_state_enter(SimState.GOAL_REACHED, self._on_finished_entered)
        machine.on_state_enter(SimState.OUT_OF_STEPS, self._on_finished_entered)
        return simulation

    # Properties

    @property
    def simulation(self) -> Simulation:
        return self._simulation

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def current_state(self) -> SimState:
        return self._simulation.state

    def is_active(self) -> bool:
        """Check if the timer is currently ticking."""
        return self._timer.isActive()

    # Run control

    def start(self) -> bool:
        """Start the run."""
        return self._simulation.state_machine.start()

    def pause(self) -> bool:
        """Pause the run."""
        return self._simulation.state_machine.pause()

    def resume(self) -> bool:
        """Resume a paused run."""
        return self._simulation.state_machine.resume()

    def reset(self, world: GridWorld):
        """Stop the current run and prepare a fresh one on a new world."""
        self._timer.stop()
        self._simulation = self._create_simulation(world)
        self.state_changed.emit(SimState.IDLE)

    # State Machine Callbacks

    def _on_running_entered(self, context):
        self._timer.start()
        self.state_changed.emit(SimState.RUNNING)

    def _on_paused_entered(self, context):
        self._timer.stop()
        self.state_changed.emit(SimState.PAUSED)

    def _on_idle_entered(self, context):
        self._timer.stop()
        self.state_changed.emit(SimState.IDLE)

    def _on_finished_entered(self, context):
        self._timer.stop()
        self.state_changed.emit(self._simulation.state)
        self.simulation_finished.emit(self._simulation.result())

    def _on_timer_tick(self):
        """Called on each timer tick during run mode."""
        if not self._simulation.state_machine.is_running():
            return
        record = self._simulation.step()
        self.step_completed.emit(record)
