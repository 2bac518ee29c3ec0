"""Gomoku game state and the small value types shared by the rules and AI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

import numpy as np


class Move(NamedTuple):
    row: int
    col: int


class MoveRecord(NamedTuple):
    """A placement as stored in the move log: cell plus the side that played it."""

    row: int
    col: int
    player: int


class Difficulty(str, Enum):
    """Computer opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class WinResult:
    """Winning side plus the contiguous cells that form the line."""

    winner: int
    line: List[Tuple[int, int]]


@dataclass
class GomokuState:
    board: np.ndarray
    current_player_index: int
    winner: Optional[int]
    done: bool
    last_move: Optional[Move] = None
    win_line: List[Tuple[int, int]] = field(default_factory=list)
