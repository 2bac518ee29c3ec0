"""Base agent interface."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from src.games.gomoku import Move, is_board_full


class BaseAgent(ABC):
    """Base class for the computer opponents."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Args:
            seed: Random seed for reproducibility (uses local RNG, not global)
            rng: Ready generator to share; takes precedence over ``seed``
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def select_move(self, board: np.ndarray, side: int) -> Move:
        """
        Return the move ``side`` should play on ``board``.

        The board may be touched by trial placements while thinking but is
        unchanged when this returns.
        """
        if is_board_full(board):
            raise ValueError("No legal moves available: the board is full")
        return self._select(board, side)

    @abstractmethod
    def _select(self, board: np.ndarray, side: int) -> Move:
        """Strategy-specific move choice on a board with at least one empty cell."""
