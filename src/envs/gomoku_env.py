"""Gomoku environment: the live board a match is played on."""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from src.agents.move_engine import find_best_ai_move
from src.games.gomoku import (
    BOARD_SIZE,
    Difficulty,
    GomokuGame,
    GomokuState,
    Move,
    MoveRecord,
    in_bounds,
)
from .base import StepResult, TurnBasedEnv


class GomokuEnv(TurnBasedEnv):
    """
    Gomoku environment (15 × 15, five in a row wins).

    The env is the only writer of the live board: human moves, engine moves
    and clock-forced moves all go through :meth:`step`, and every accepted
    placement is appended to :attr:`move_log`.
    """

    def __init__(self, seed: Optional[int] = None):
        self.size = BOARD_SIZE
        self._game = GomokuGame()
        self._state: Optional[GomokuState] = None
        self._move_log: List[MoveRecord] = []
        self._rng = random.Random(seed)
        self.reset()

    # ------------------------------------------------------------------
    # TurnBasedEnv interface
    # ------------------------------------------------------------------

    def reset(self, seed: Optional[int] = None) -> np.ndarray:
        if seed is not None:
            self._rng = random.Random(seed)

        self._state = self._game.initial_state()
        self._move_log = []
        return self.board

    def step(self, action: Union[Move, Tuple[int, int]]) -> StepResult:
        if self.done:
            raise ValueError("Episode is done. Call reset() first.")

        row, col = action
        if not in_bounds(row, col) or self.board[row, col] != 0:
            info = {
                "winner": None,
                "termination_reason": "illegal",
                "invalid_action": True,
                "win_line": [],
            }
            return StepResult(board=self.board, terminated=False, info=info)

        current_token = self.current_player_token
        assert self._state is not None
        self._state = self._game.apply_action(self._state, Move(row, col))
        self._move_log.append(MoveRecord(row, col, current_token))

        info: Dict[str, Any] = {
            "winner": self._state.winner,
            "termination_reason": None,
            "invalid_action": False,
            "win_line": list(self._state.win_line),
        }
        if self._state.done:
            info["termination_reason"] = "draw" if self._state.winner == 0 else "win"

        return StepResult(board=self.board, terminated=self._state.done, info=info)

    def engine_move(self, difficulty: Union[Difficulty, str]) -> StepResult:
        """Play an engine move for whichever side is on turn: the computer, or a human out of time."""
        if self.done:
            raise ValueError("Episode is done. Call reset() first.")
        move = find_best_ai_move(self.board, self.current_player_token, difficulty, rng=self._rng)
        return self.step(move)

    # ------------------------------------------------------------------
    # Legal actions & state API
    # ------------------------------------------------------------------

    def get_legal_actions(self) -> List[Move]:
        assert self._state is not None
        return list(self._game.legal_actions(self._state))

    @property
    def legal_actions_mask(self) -> np.ndarray:
        assert self._state is not None
        if self._state.done:
            return np.zeros_like(self._state.board, dtype=bool)
        return self._state.board == 0

    def current_player(self) -> int:
        assert self._state is not None
        return self._state.current_player_index

    @property
    def current_player_token(self) -> int:
        assert self._state is not None
        return self._game.current_player(self._state)

    @property
    def board(self) -> np.ndarray:
        assert self._state is not None
        return self._state.board

    @property
    def last_move(self) -> Optional[Move]:
        assert self._state is not None
        return self._state.last_move

    @property
    def winner(self) -> Optional[int]:
        assert self._state is not None
        return self._state.winner

    @property
    def win_line(self) -> List[Tuple[int, int]]:
        assert self._state is not None
        return list(self._state.win_line)

    @property
    def done(self) -> bool:
        assert self._state is not None
        return self._state.done

    @property
    def move_log(self) -> List[MoveRecord]:
        return list(self._move_log)

    # ------------------------------------------------------------------
    # Utilities & debugging
    # ------------------------------------------------------------------

    def render(self, mode: str = "human") -> Optional[str]:
        symbols = {1: "X", -1: "O", 0: "."}
        highlight = set(self.win_line)
        lines = ["   " + " ".join(f"{c:x}" for c in range(self.size))]
        for row in range(self.size):
            cells = []
            for col in range(self.size):
                symbol = symbols[int(self.board[row, col])]
                # winning line in lower case
                cells.append(symbol.lower() if (row, col) in highlight else symbol)
            lines.append(f"{row:x}  " + " ".join(cells))

        if self.done:
            if self.winner == 1:
                lines.append("Player X wins!")
            elif self.winner == -1:
                lines.append("Player O wins!")
            else:
                lines.append("Draw!")
        else:
            player_symbol = "X" if self.current_player_token == 1 else "O"
            lines.append(f"Current player: {player_symbol}")

        text = "\n".join(lines)
        if mode == "human":
            print(text)
            print()
            return None
        return text

    def get_state(self) -> GomokuState:
        assert self._state is not None
        return GomokuState(
            board=self.board.copy(),
            current_player_index=self._state.current_player_index,
            winner=self._state.winner,
            done=self._state.done,
            last_move=self._state.last_move,
            win_line=list(self._state.win_line),
        )

    def load_moves(self, moves: Sequence[MoveRecord]) -> None:
        """Reset and replay a recorded move list through :meth:`step`."""
        self.reset()
        for record in moves:
            if record.player != self.current_player_token:
                raise ValueError(
                    f"Move {tuple(record)} is out of turn: expected side {self.current_player_token}"
                )
            result = self.step(Move(record.row, record.col))
            if result.info["invalid_action"]:
                raise ValueError(f"Illegal recorded move: {tuple(record)}")
