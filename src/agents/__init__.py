"""Agent modules."""

from .base_agent import BaseAgent
from .easy_agent import EasyAgent
from .medium_agent import MediumAgent
from .hard_agent import HardAgent
from .move_engine import find_best_ai_move
from ..registry import list_agents, register_agent

if "easy" not in list_agents():
    register_agent("easy", EasyAgent)
if "medium" not in list_agents():
    register_agent("medium", MediumAgent)
if "hard" not in list_agents():
    register_agent("hard", HardAgent)

__all__ = [
    "BaseAgent",
    "EasyAgent",
    "MediumAgent",
    "HardAgent",
    "find_best_ai_move",
]
