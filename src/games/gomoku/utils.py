"""Shared utilities for Gomoku board logic."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .state import WinResult

BOARD_SIZE = 15
WIN_LENGTH = 5
CENTER = BOARD_SIZE // 2

EMPTY = 0
BLACK = 1   # ходит первым
WHITE = -1

# horizontal, vertical, diagonal \, diagonal /
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def opponent(side: int) -> int:
    return -side


def create_empty_board() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def place(board: np.ndarray, row: int, col: int, side: int) -> None:
    """
    Put a stone for ``side`` on ``board`` in place.

    Raises:
        ValueError: if the coordinates are off the board, the cell is taken
            or ``side`` is not a player token.
    """
    if side not in (BLACK, WHITE):
        raise ValueError(f"Unknown side: {side}")
    if not in_bounds(row, col):
        raise ValueError(f"Illegal action: ({row}, {col}) is off the board")
    if board[row, col] != EMPTY:
        raise ValueError(f"Cell ({row}, {col}) is already occupied")
    board[row, col] = side


@contextmanager
def trial_placement(board: np.ndarray, row: int, col: int, side: int) -> Iterator[np.ndarray]:
    """
    Temporarily put ``side`` at an empty cell for look-ahead evaluation.

    The cell is reset to empty when the block exits, including on errors,
    so callers never observe the hypothetical stone.

    Raises:
        ValueError: if the cell already holds a stone.
    """
    if board[row, col] != EMPTY:
        raise ValueError(f"Cell ({row}, {col}) is already occupied")
    board[row, col] = side
    try:
        yield board
    finally:
        board[row, col] = EMPTY


def _run(
    board: np.ndarray, row: int, col: int, dr: int, dc: int, side: int
) -> Iterator[Tuple[int, int]]:
    r, c = row + dr, col + dc
    while in_bounds(r, c) and board[r, c] == side:
        yield r, c
        r += dr
        c += dc


def check_winner(
    board: np.ndarray,
    last_row: int,
    last_col: int,
    side: int,
) -> Optional[WinResult]:
    """
    Check whether the stone just placed at (last_row, last_col) completes
    five or more in a row for ``side``.

    Axes are checked in the order of ``DIRECTIONS``; the first qualifying
    axis is reported.

    Returns:
        WinResult with the placed cell first, then the forward run, then the
        backward run; None if no axis has WIN_LENGTH contiguous stones.
    """
    for dr, dc in DIRECTIONS:
        line = [(last_row, last_col)]
        line.extend(_run(board, last_row, last_col, dr, dc, side))
        line.extend(_run(board, last_row, last_col, -dr, -dc, side))
        if len(line) >= WIN_LENGTH:
            return WinResult(winner=side, line=line)
    return None


def is_board_full(board: np.ndarray) -> bool:
    return bool(np.all(board != EMPTY))


def is_empty_board(board: np.ndarray) -> bool:
    return not np.any(board)


def count_neighbors(board: np.ndarray, row: int, col: int, radius: int = 1) -> int:
    """Number of stones within Chebyshev distance ``radius``, centre excluded."""
    r0, r1 = max(row - radius, 0), min(row + radius + 1, BOARD_SIZE)
    c0, c1 = max(col - radius, 0), min(col + radius + 1, BOARD_SIZE)
    count = int(np.count_nonzero(board[r0:r1, c0:c1]))
    if board[row, col] != EMPTY:
        count -= 1
    return count


def empty_cells(board: np.ndarray) -> Iterator[Tuple[int, int]]:
    """Empty cells in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row, col] == EMPTY:
                yield row, col


def replay_moves(moves: Iterable[Sequence[int]]) -> np.ndarray:
    """
    Rebuild a board by placing ``(row, col, side)`` triples in order.

    Args:
        moves: Ordered placements, e.g. MoveRecord instances or plain tuples.

    Returns:
        A fresh board with every placement applied.
    """
    board = create_empty_board()
    for row, col, side in moves:
        place(board, row, col, side)
    return board
