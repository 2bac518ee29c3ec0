"""One-ply evaluation helpers shared by the Gomoku agents."""

from __future__ import annotations

from typing import NamedTuple, Optional

import numpy as np

from src.games.gomoku import (
    DIRECTIONS,
    EMPTY,
    Move,
    check_winner,
    empty_cells,
    in_bounds,
    trial_placement,
)

FIVE_SCORE = 1_000_000
LIVE_FOUR_SCORE = 500_000
DEAD_FOUR_SCORE = 10_000
LIVE_THREE_SCORE = 5_000
DEAD_THREE_SCORE = 100
LIVE_TWO_SCORE = 100
BASE_SCORE = 1


class LineInfo(NamedTuple):
    consecutive: int
    open_ends: int


def find_winning_move(board: np.ndarray, side: int) -> Optional[Move]:
    """
    Find a cell where ``side`` would complete five right away.

    Empty cells are tried in row-major order, so the answer is the same for
    the same board.

    Returns:
        First winning cell, or None.
    """
    for row, col in empty_cells(board):
        with trial_placement(board, row, col, side):
            won = check_winner(board, row, col, side) is not None
        if won:
            return Move(row, col)
    return None


def _run_length(board: np.ndarray, row: int, col: int, dr: int, dc: int, side: int) -> int:
    length = 0
    r, c = row + dr, col + dc
    while in_bounds(r, c) and board[r, c] == side:
        length += 1
        r += dr
        c += dc
    return length


def max_chain_length(board: np.ndarray, row: int, col: int, side: int) -> int:
    """Longest run of ``side`` through (row, col) over the four axes, the cell included."""
    best = 0
    for dr, dc in DIRECTIONS:
        count = 1 + _run_length(board, row, col, dr, dc, side) + _run_length(board, row, col, -dr, -dc, side)
        best = max(best, count)
    return best


def line_info(board: np.ndarray, row: int, col: int, dr: int, dc: int, side: int) -> LineInfo:
    """
    Measure the run ``side`` would have along one axis with a stone at (row, col).

    An end counts as open only when the run stops at an empty cell; the
    board edge and opponent stones close it.
    """
    consecutive = 1
    open_ends = 0
    for sign in (1, -1):
        step_r, step_c = dr * sign, dc * sign
        length = _run_length(board, row, col, step_r, step_c, side)
        consecutive += length
        r, c = row + step_r * (length + 1), col + step_c * (length + 1)
        if in_bounds(r, c) and board[r, c] == EMPTY:
            open_ends += 1
    return LineInfo(consecutive, open_ends)


def pattern_score(consecutive: int, open_ends: int) -> int:
    if consecutive >= 5:
        return FIVE_SCORE
    if consecutive == 4:
        if open_ends == 2:
            return LIVE_FOUR_SCORE
        if open_ends == 1:
            return DEAD_FOUR_SCORE
    if consecutive == 3:
        if open_ends == 2:
            return LIVE_THREE_SCORE
        if open_ends == 1:
            return DEAD_THREE_SCORE
    if consecutive == 2 and open_ends == 2:
        return LIVE_TWO_SCORE
    return BASE_SCORE


def evaluate_cell(board: np.ndarray, row: int, col: int, side: int) -> int:
    """
    Pattern score of a hypothetical ``side`` stone at (row, col).

    Sums ``pattern_score`` over the four axes. The cell itself is never
    read, so it is safe to call on an empty cell without placing anything.
    """
    score = 0
    for dr, dc in DIRECTIONS:
        info = line_info(board, row, col, dr, dc, side)
        score += pattern_score(info.consecutive, info.open_ends)
    return score
