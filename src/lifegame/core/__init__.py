"""Core life-game simulation logic."""

from .board import Board
from .controller import Clear, Command, Controller, Randomize, RunState, StepOnce, ToggleRunning
from .scheduler import FrameThrottle, StepScheduler
from .session import Session, SessionConfig
from .snapshot import BoardSnapshot, CellSource

__all__ = [
    "Board",
    "BoardSnapshot",
    "CellSource",
    "Clear",
    "Command",
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
