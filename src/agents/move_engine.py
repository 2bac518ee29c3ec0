"""Single entry point the turn driver calls to get the computer's move."""

from __future__ import annotations

import random
from typing import Optional, Union

import numpy as np

from src.games.gomoku import Difficulty, Move
from src.registry import make_agent


def find_best_ai_move(
    board: np.ndarray,
    side: int,
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random] = None,
) -> Move:
    """
    Pick the next move for ``side`` with the strategy for ``difficulty``.

    Args:
        board: Live board; left exactly as it was on return.
        side: Token of the side to move (1 or -1).
        difficulty: Difficulty tag or its string value ("easy", "medium", "hard").
        rng: Random source for tie-breaking; a fresh unseeded one if None.

    Returns:
        An empty cell. On an empty board, always the centre.

    Raises:
        ValueError: if the board is full or the difficulty is unknown.
    """
    difficulty = Difficulty(difficulty)
    agent = make_agent(difficulty.value, rng=rng)
    return agent.select_move(board, side)
