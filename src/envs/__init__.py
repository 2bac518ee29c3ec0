"""Environment modules."""

from .base import StepResult, TurnBasedEnv
from .gomoku_env import GomokuEnv
from .turn_clock import TurnClock

__all__ = ["GomokuEnv", "StepResult", "TurnBasedEnv", "TurnClock"]
