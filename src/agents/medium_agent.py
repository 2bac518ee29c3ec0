"""Medium agent: greedy chain builder."""

from __future__ import annotations

from typing import List

import numpy as np

from src.games.gomoku import BOARD_SIZE, CENTER, Move, empty_cells, opponent, trial_placement
from src.search import find_winning_move, max_chain_length

from .base_agent import BaseAgent


class MediumAgent(BaseAgent):
    """
    Greedy agent that uses simple rules:
    1. Win if possible
    2. Block opponent from winning
    3. Otherwise play where its own longest chain grows the most,
       preferring cells near the centre
    """

    def _select(self, board: np.ndarray, side: int) -> Move:
        winning = find_winning_move(board, side)
        if winning is not None:
            return winning

        block = find_winning_move(board, opponent(side))
        if block is not None:
            return block

        best_score = -1
        best_moves: List[Move] = []
        for r, c in empty_cells(board):
            with trial_placement(board, r, c, side):
                chain = max_chain_length(board, r, c, side)
            score = chain * 100 + self._centrality(r, c)

            if score > best_score:
                best_score = score
                best_moves = [Move(r, c)]
            elif score == best_score:
                best_moves.append(Move(r, c))

        if best_moves:
            return self._rng.choice(best_moves)

        return Move(CENTER, CENTER)

    @staticmethod
    def _centrality(row: int, col: int) -> int:
        return BOARD_SIZE - abs(row - CENTER) - abs(col - CENTER)
