"""Tests for the Controller and its commands."""

import dataclasses

import numpy as np
import pytest

from lifegame.core.board import Board
from lifegame.core.controller import Clear, Controller, Randomize, RunState, StepOnce, ToggleRunning


@pytest.fixture
def board():
    board = Board(7, 7, initial_probability=0.0)
    # Horizontal blinker
    for x in (2, 3, 4):
        board.set_alive(x, 3, True)
    return board


@pytest.fixture
def controller(board):
    return Controller(board)


class TestController:
    """Test cases for the Controller class."""

    def test_initial_state_is_running(self, controller):
        assert controller.state is RunState.RUNNING

    def test_toggle_running(self, controller, board):
        """Test toggling is symmetric in both directions."""
        assert controller.dispatch(ToggleRunning()) is True
        assert board.running is False
        assert controller.state is RunState.PAUSED

        controller.dispatch(ToggleRunning())
        assert board.running is True
        assert controller.state is RunState.RUNNING

    def test_step_once_ignored_while_running(self, controller, board):
        """Test manual stepping is a no-op while the scheduler is running."""
        before = np.array(board.cells)

        assert controller.dispatch(StepOnce()) is False

        assert np.array_equal(board.cells, before)
        assert board.generation == 0

    def test_step_once_while_paused(self, controller, board):
        """Test manual stepping advances exactly one generation while paused."""
        controller.toggle_running()

        assert controller.dispatch(StepOnce()) is True

        assert board.generation == 1
        assert board.is_alive(3, 2)
        assert board.is_alive(3, 3)
        assert board.is_alive(3, 4)
        assert not board.is_alive(2, 3)
        assert board.population == 3

    def test_randomize_in_any_state(self, controller, board):
        controller.dispatch(Randomize(1.0))
        assert board.population == 49

        controller.toggle_running()
        controller.dispatch(Randomize(0.0))
        assert board.population == 0

    def test_randomize_clamps(self, controller, board):
        controller.dispatch(Randomize(3.0))
        assert board.population == 49

    def test_randomize_default_probability(self):
        assert Randomize().probability == 0.25

    def test_clear_in_any_state(self, controller, board):
        assert controller.dispatch(Clear()) is True
        assert board.population == 0

        board.set_alive(1, 1, True)
        controller.toggle_running()
        controller.dispatch(Clear())
        assert board.population == 0

    def test_clear_then_step_stays_dead(self, controller, board):
        controller.clear()
        controller.toggle_running()
        controller.step_once()
        assert board.population == 0

    def test_commands_leave_run_state_alone(self, controller, board):
        """Test only ToggleRunning changes the run state."""
        for command in [StepOnce(), Randomize(0.5), Clear()]:
            controller.dispatch(command)
            assert board.running is True

    def test_unknown_command(self, controller):
        with pytest.raises(TypeError):
            controller.dispatch("step")

    def test_commands_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Randomize(0.5).probability = 0.9
        assert Randomize(0.5) == Randomize(0.5)
        assert StepOnce() == StepOnce()
