from __future__ import annotations

from .game import GomokuGame
from .state import Difficulty, GomokuState, Move, MoveRecord, WinResult
from .utils import (
    BLACK,
    BOARD_SIZE,
    CENTER,
    DIRECTIONS,
    EMPTY,
    WHITE,
    WIN_LENGTH,
    check_winner,
    count_neighbors,
    create_empty_board,
    empty_cells,
    in_bounds,
    is_board_full,
    is_empty_board,
    opponent,
    place,
    replay_moves,
    trial_placement,
)

__all__ = [
    "BLACK",
    "BOARD_SIZE",
    "CENTER",
    "DIRECTIONS",
    "Difficulty",
    "EMPTY",
    "GomokuGame",
    "GomokuState",
    "Move",
    "MoveRecord",
    "WHITE",
    "WIN_LENGTH",
    "WinResult",
    "check_winner",
    "count_neighbors",
    "create_empty_board",
    "empty_cells",
    "in_bounds",
    "is_board_full",
    "is_empty_board",
    "opponent",
    "place",
    "replay_moves",
    "trial_placement",
]
