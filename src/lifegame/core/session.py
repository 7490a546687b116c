"""A single life-game session: one board plus its scheduler and controller."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from .board import Board, DEFAULT_ALIVE_PROBABILITY
from .controller import Command, Controller
from .scheduler import DEFAULT_STEP_PERIOD, FrameThrottle, StepScheduler
from .snapshot import BoardSnapshot

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration fixed at session start."""
    width: int = 80
    height: int = 40
    initial_probability: float = DEFAULT_ALIVE_PROBABILITY
    step_period: float = DEFAULT_STEP_PERIOD
    draw_period: float = DEFAULT_STEP_PERIOD
    randomize_probability: float = DEFAULT_ALIVE_PROBABILITY
    seed: Optional[int] = None

    def validate(self) -> List[str]:
        """Check the configuration.

        Returns:
            List of error messages, empty if the configuration is usable
        """
        errors = []
        if self.width < 0:
            errors.append("Width must be non-negative")
        if self.height < 0:
            errors.append("Height must be non-negative")
        if not 0.0 <= self.initial_probability <= 1.0:
            errors.append("Initial population must be between 0.0 and 1.0")
        if self.step_period <= 0:
            errors.append("Step period must be positive")
        if self.draw_period <= 0:
            errors.append("Draw period must be positive")
        return errors


class Session:
    """Owns the board, scheduler, controller and draw throttle of one run.

    Hosts call ``update`` once per frame, ``command`` for user input and
    ``draw_due`` to find out when to render.
    """

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        """Initialize a session.

        Args:
            config: Session configuration (defaults to an 80x40 board)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or SessionConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError("; ".join(errors))

        rng = np.random.default_rng(self.config.seed)
        self.board = Board(
            self.config.width,
            self.config.height,
            initial_probability=self.config.initial_probability,
            rng=rng,
        )
        self.scheduler = StepScheduler(self.board, self.config.step_period)
        self.controller = Controller(self.board)
        self.draw_throttle = FrameThrottle(self.config.draw_period)

        logger.info(
            "Started %dx%d session (step every %.3f, draw every %.3f)",
            self.board.width,
            self.board.height,
            self.config.step_period,
            self.config.draw_period,
        )

    def update(self, elapsed: float) -> bool:
        """Feed one frame's elapsed time to the scheduler.

        Returns:
            True if a generation was advanced
        """
        return self.scheduler.tick(elapsed)

    def command(self, command: Command) -> bool:
        """Dispatch a user command to the controller."""
        return self.controller.dispatch(command)

    def draw_due(self, elapsed: float) -> Optional[BoardSnapshot]:
        """Tick the draw throttle.

        Returns:
            A snapshot to render if a draw pass is due, otherwise None
        """
        if self.draw_throttle.tick(elapsed):
            return self.snapshot()
        return None

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.capture(self.board)

    def statistics(self) -> Dict[str, Any]:
        """Get a summary of the current session state.

        Returns:
            Dictionary with generation, population and run state
        """
        size = self.board.size
        population = self.board.population
        return {
            "generation": self.board.generation,
            "population": population,
            "population_density": population / size if size else 0.0,
            "running": self.board.running,
            "state": self.controller.state.value,
            "grid_size": self.board.shape,
        }
