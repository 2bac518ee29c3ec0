"""Easy agent: mostly random moves next to existing stones."""

from __future__ import annotations

import numpy as np

from src.games.gomoku import CENTER, Move, count_neighbors, empty_cells, is_empty_board, opponent
from src.search import find_winning_move

from .base_agent import BaseAgent


class EasyAgent(BaseAgent):
    """
    Weak opponent:
    1. Occasionally (``block_probability``) block an immediate opponent win
    2. Otherwise play a random empty cell touching any stone
    """

    block_probability = 0.2

    def _select(self, board: np.ndarray, side: int) -> Move:
        if self._rng.random() < self.block_probability:
            block = find_winning_move(board, opponent(side))
            if block is not None:
                return block

        if is_empty_board(board):
            candidates = [Move(CENTER, CENTER)]
        else:
            candidates = [
                Move(r, c) for r, c in empty_cells(board) if count_neighbors(board, r, c) > 0
            ]

        if candidates:
            return self._rng.choice(candidates)

        return Move(CENTER, CENTER)
