"""Run/pause/step/randomize/clear commands applied to a board."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .board import Board, DEFAULT_ALIVE_PROBABILITY

logger = logging.getLogger(__name__)


class RunState(Enum):
    """The two states of the run/pause machine."""

    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class ToggleRunning:
    """Switch between running and paused."""


@dataclass(frozen=True)
class StepOnce:
    """Advance one generation by hand; only honoured while paused."""


@dataclass(frozen=True)
class Randomize:
    """Reseed the board; probability is clamped to [0, 1] by the board."""

    probability: float = DEFAULT_ALIVE_PROBABILITY


@dataclass(frozen=True)
class Clear:
    """Kill every cell."""


Command = Union[ToggleRunning, StepOnce, Randomize, Clear]


class Controller:
    """Apply user commands to a board.

    The controller is the only component that flips ``board.running``.
    Commands run synchronously when dispatched; nothing is queued.
    """

    def __init__(self, board: Board) -> None:
        self.board = board

    @property
    def state(self) -> RunState:
        """Current run state derived from the board's flag."""
        return RunState.RUNNING if self.board.running else RunState.PAUSED

    def dispatch(self, command: Command) -> bool:
        """Execute a command.

        Args:
            command: One of ToggleRunning, StepOnce, Randomize or Clear

        Returns:
            True if the command changed the board, False if it was ignored

        Raises:
            TypeError: If the command type is unknown
        """
        if isinstance(command, ToggleRunning):
            self.toggle_running()
            return True
        if isinstance(command, StepOnce):
            return self.step_once()
        if isinstance(command, Randomize):
            self.randomize(command.probability)
            return True
        if isinstance(command, Clear):
            self.clear()
            return True
        raise TypeError(f"Unknown command: {command!r}")

    def toggle_running(self) -> RunState:
        """Toggle the simulation running state."""
        self.board.running = not self.board.running
        logger.debug("Simulation %s", self.state.value)
        return self.state

    def step_once(self) -> bool:
        """Step one generation if paused; no-op while running."""
        if self.board.running:
            return False
        self.board.step()
        return True

    def randomize(self, probability: float = DEFAULT_ALIVE_PROBABILITY) -> None:
        self.board.randomize(probability)

    def clear(self) -> None:
        self.board.clear()
