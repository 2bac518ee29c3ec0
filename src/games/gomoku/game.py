"""Gomoku game rules (immutable state, for look-ahead and replay)."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from src.games.turn_based_game import TurnBasedGame
from .state import GomokuState, Move
from .utils import (
    BLACK,
    BOARD_SIZE,
    WHITE,
    check_winner,
    create_empty_board,
    empty_cells,
    in_bounds,
    is_board_full,
)


class GomokuGame(TurnBasedGame[GomokuState, Move]):
    """
    Pure five-in-a-row rules on a 15x15 board: only state transitions.

    Black (token 1) moves first, sides alternate one stone per turn.
    """

    def __init__(self) -> None:
        self.size = BOARD_SIZE
        self._player_tokens = np.array([BLACK, WHITE], dtype=np.int8)

    def initial_state(self) -> GomokuState:
        return GomokuState(
            board=create_empty_board(),
            current_player_index=0,
            winner=None,
            done=False,
        )

    def legal_actions(self, state: GomokuState) -> Sequence[Move]:
        if state.done:
            return []
        return [Move(r, c) for r, c in empty_cells(state.board)]

    def apply_action(self, state: GomokuState, action: Move) -> GomokuState:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")

        row, col = action
        if not in_bounds(row, col):
            raise ValueError(f"Illegal action: {tuple(action)}")
        if state.board[row, col] != 0:
            raise ValueError(f"Cell {tuple(action)} is already occupied")

        board = state.board.copy()
        current_token = self.current_player(state)
        board[row, col] = current_token

        winner: Optional[int] = None
        done = False
        win_line: List = []

        result = check_winner(board, row, col, current_token)
        if result is not None:
            winner = result.winner
            win_line = result.line
            done = True
        elif is_board_full(board):
            winner = 0
            done = True

        return GomokuState(
            board=board,
            current_player_index=1 - state.current_player_index,
            winner=winner,
            done=done,
            last_move=Move(row, col),
            win_line=win_line,
        )

    def current_player(self, state: GomokuState) -> int:
        return int(self._player_tokens[state.current_player_index])

    def is_terminal(self, state: GomokuState) -> bool:
        return state.done

    def winner(self, state: GomokuState) -> Optional[int]:
        return state.winner

    def replay(self, moves: Iterable[Move]) -> GomokuState:
        """Apply ``moves`` in order starting from the initial state."""
        state = self.initial_state()
        for move in moves:
            state = self.apply_action(state, Move(*move))
        return state
