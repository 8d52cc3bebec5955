import logging

import pytest

from pathbot.app.fsm import SimStateMachine, SimState
from pathbot.app.simulation import Simulation
from pathbot.domain.types import Action, Position

from conftest import make_world


class CrashingRobot:
    def decide_action(self):
        raise RuntimeError("boom")


class ScriptedRobot:
    def __init__(self, *actions):
        self._actions = list(actions)

    def decide_action(self):
        action = self._actions.pop(0)
        if isinstance(action, Exception):
            raise action
        return action


def test_state_machine_transitions():
    machine = SimStateMachine()
    entered = []
    machine.on_state_enter(SimState.PAUSED, lambda context: entered.append(context))

    assert not machine.pause()
    assert machine.start()
    assert machine.pause({"why": "test"})
    assert entered == [{"why": "test"}]
    assert not machine.reach_goal()
    assert machine.resume()
    assert machine.reach_goal()
    assert machine.is_finished()
    assert machine.get_state_description() == "Goal reached"
    assert not machine.start()
    assert machine.reset_to_idle()
    assert machine.current_state == SimState.IDLE


def test_run_reaches_goal_in_corridor():
    simulation = Simulation(make_world("RCCT"), iterations=10)

    result = simulation.run()

    assert result.goal_reached
    assert result.steps == 3
    assert result.actions == [Action.MOVE_RIGHT] * 3
    assert result.final_position == Position(0, 3)
    assert simulation.state == SimState.GOAL_REACHED


def test_run_stops_at_step_budget_when_unreachable(caplog):
    simulation = Simulation(make_world("R", "W", "T"), iterations=5)

    with caplog.at_level(logging.INFO):
        result = simulation.run()

    assert not result.goal_reached
    assert result.steps == 5
    assert result.actions == [Action.DO_NOTHING] * 5
    assert simulation.state == SimState.OUT_OF_STEPS
    assert "Goal Condition was not met after 05 steps..." in caplog.text


def test_starting_on_target_finishes_after_one_step():
    world = make_world("CT")
    world.apply_action(Action.MOVE_RIGHT)

    result = Simulation(world).run()

    assert result.goal_reached
    assert result.steps == 1
    assert result.actions == [Action.DO_NOTHING]


def test_agent_crash_is_treated_as_do_nothing(caplog):
    world = make_world("RCT")
    simulation = Simulation(world, robot=CrashingRobot(), iterations=3)

    result = simulation.run()

    assert result.crashes == 3
    assert result.actions == [Action.DO_NOTHING] * 3
    assert result.final_position == Position(0, 0)
    assert "[ERROR AGENT CRASH AT TIME STEP 000] boom" in caplog.text
    assert "[ERROR AGENT CRASH AT TIME STEP 002] boom" in caplog.text


def test_crash_logging_is_quiet_without_debug(caplog):
    world = make_world("RCT")
    simulation = Simulation(world, robot=CrashingRobot(), iterations=1, debug=False)

    with caplog.at_level(logging.WARNING):
        simulation.run()

    assert "AGENT CRASH" not in caplog.text


def test_run_continues_after_a_crash():
    world = make_world("RCT")
    robot = ScriptedRobot(Action.MOVE_RIGHT, RuntimeError("glitch"), Action.MOVE_RIGHT)

    simulation = Simulation(world, robot=robot, iterations=10)
    records = [simulation.step() for _ in range(3)]

    assert [r.crashed for r in records] == [False, True, False]
    assert [r.position for r in records] == [(0, 1), (0, 1), (0, 2)]
    assert simulation.is_finished()


def test_step_after_finish_or_while_paused_is_rejected():
    simulation = Simulation(make_world("RT"), iterations=5)
    simulation.run()

    with pytest.raises(RuntimeError):
        simulation.step()

    paused = Simulation(make_world("RCT"), iterations=5)
    paused.step()
    paused.state_machine.pause()
    with pytest.raises(RuntimeError):
        paused.step()


def test_iterations_must_be_positive():
    with pytest.raises(ValueError):
        Simulation(make_world("RT"), iterations=0)
