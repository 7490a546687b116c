"""Toroidal Game of Life engine with a fixed-period scheduler and run/pause controls."""

__version__ = "0.1.0"

from .core.board import Board
from .core.controller import Clear, Controller, Randomize, RunState, StepOnce, ToggleRunning
from .core.scheduler import FrameThrottle, StepScheduler
from .core.session import Session, SessionConfig
from .core.snapshot import BoardSnapshot

__all__ = [
    "Board",
    "BoardSnapshot",
    "Clear",
    "Controller",
    "FrameThrottle",
    "Randomize",
    "RunState",
    "Session",
    "SessionConfig",
    "StepOnce",
    "StepScheduler",
    "ToggleRunning",
]
