"""Hard agent: weighted attack/defence pattern scoring."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

import numpy as np

from src.games.gomoku import CENTER, Move, count_neighbors, empty_cells, is_empty_board, opponent
from src.search import evaluate_cell

from .base_agent import BaseAgent


class HardAgent(BaseAgent):
    """
    Pattern-scoring agent for Gomoku:
    1. Open in the centre on an empty board
    2. For every empty cell within two cells of a stone, score the shapes
       it would make for itself (attack) and deny to the opponent (defence)
    3. Play the best total, ties broken at random

    Scores come in coarse buckets, so totals closer than ``tie_tolerance``
    are treated as equal. With ``exact_ties=False`` ties are collected
    against the best total seen so far during the scan; with
    ``exact_ties=True`` against the final maximum.
    """

    defense_weight = 0.8
    tie_tolerance = 1.0
    search_radius = 2

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        exact_ties: bool = False,
    ):
        """
        Args:
            seed: Random seed for reproducibility
            rng: Ready generator to share; takes precedence over ``seed``
            exact_ties: Collect ties against the final best total instead of the running one
        """
        super().__init__(seed=seed, rng=rng)
        self.exact_ties = exact_ties

    def _select(self, board: np.ndarray, side: int) -> Move:
        if is_empty_board(board):
            return Move(CENTER, CENTER)

        scored = self.score_cells(board, side)
        if not scored:
            return Move(CENTER, CENTER)

        if self.exact_ties:
            best_score = max(score for _, score in scored)
            best_moves = [move for move, score in scored if best_score - score < self.tie_tolerance]
        else:
            best_moves = self._incremental_ties(scored)

        return self._rng.choice(best_moves)

    def score_cells(self, board: np.ndarray, side: int) -> List[Tuple[Move, float]]:
        """Attack plus weighted defence for each candidate cell, in row-major order."""
        enemy = opponent(side)
        scored = []
        for r, c in empty_cells(board):
            # isolated cells never matter
            if count_neighbors(board, r, c, self.search_radius) == 0:
                continue
            attack = evaluate_cell(board, r, c, side)
            defense = evaluate_cell(board, r, c, enemy)
            scored.append((Move(r, c), attack + defense * self.defense_weight))
        return scored

    def _incremental_ties(self, scored: List[Tuple[Move, float]]) -> List[Move]:
        best_score = float("-inf")
        best_moves: List[Move] = []
        for move, score in scored:
            if score > best_score:
                best_score = score
                best_moves = [move]
            elif abs(score - best_score) < self.tie_tolerance:
                best_moves.append(move)
        return best_moves
