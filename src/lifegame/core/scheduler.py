"""Accumulator-based timers that decouple generations from host frames."""

import logging

from .board import Board

logger = logging.getLogger(__name__)

DEFAULT_STEP_PERIOD = 0.25


def _validate_period(period: float) -> float:
    period = float(period)
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    return period


def _validate_elapsed(elapsed: float) -> float:
    elapsed = float(elapsed)
    if elapsed < 0:
        raise ValueError(f"elapsed time must be >= 0, got {elapsed}")
    return elapsed


class FrameThrottle:
    """Fire at most once per call whenever a full period has accumulated.

    Surplus time is discarded on every fire, so a long stall yields a single
    fire rather than a burst.
    """

    def __init__(self, period: float = DEFAULT_STEP_PERIOD) -> None:
        self.period = _validate_period(period)
        self.accumulator = 0.0

    def tick(self, elapsed: float) -> bool:
        """Accumulate elapsed time and report whether the period was reached."""
        self.accumulator += _validate_elapsed(elapsed)
        if self.accumulator >= self.period:
            self.accumulator = 0.0
            return True
        return False

    def reset(self) -> None:
        self.accumulator = 0.0


class StepScheduler:
    """Advance a board by one generation per elapsed period while it runs.

    Time keeps accumulating while the board is paused, so the first tick
    after resuming may step sooner than a full period.
    """

    def __init__(self, board: Board, period: float = DEFAULT_STEP_PERIOD) -> None:
        """Initialize the scheduler.

        Args:
            board: Board to advance
            period: Time between generations, in the host's time units

        Raises:
            ValueError: If period is not positive
        """
        self.board = board
        self.period = _validate_period(period)
        self.accumulator = 0.0

    def tick(self, elapsed: float) -> bool:
        """Add one frame's elapsed time and step the board if due.

        At most one generation is advanced per call, however much time
        has accumulated.

        Args:
            elapsed: Time since the previous call

        Returns:
            True if the board advanced a generation

        Raises:
            ValueError: If elapsed is negative
        """
        self.accumulator += _validate_elapsed(elapsed)
        if self.accumulator >= self.period and self.board.running:
            self.board.step()
            self.accumulator = 0.0
            logger.debug("Advanced to generation %d", self.board.generation)
            return True
        return False

    def reset(self) -> None:
        """Discard any accumulated time."""
        self.accumulator = 0.0
