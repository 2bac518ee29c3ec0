"""Finished-game records and step-by-step replay."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import numpy as np

from src.games.gomoku import Difficulty, MoveRecord, replay_moves

DRAW = "DRAW"
MAX_RECORDS = 20


@dataclass
class GameRecord:
    id: str
    date: str
    winner: Union[int, str]  # token of the winning side or DRAW
    moves: List[MoveRecord]
    skin_id: str
    difficulty: Difficulty
    turn_count: int = 0

    def __post_init__(self) -> None:
        self.moves = [MoveRecord(*m) for m in self.moves]
        self.difficulty = Difficulty(self.difficulty)
        self.turn_count = len(self.moves)

    @classmethod
    def create(
        cls,
        winner: Optional[int],
        moves: List[MoveRecord],
        skin_id: str,
        difficulty: Union[Difficulty, str],
    ) -> "GameRecord":
        """Build a record stamped with a fresh id and the current time; ``winner=None`` is a draw."""
        return cls(
            id=f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}",
            date=datetime.now().strftime("%b %d, %H:%M"),
            winner=DRAW if winner is None or winner == 0 else int(winner),
            moves=list(moves),
            skin_id=skin_id,
            difficulty=difficulty,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "winner": self.winner,
            "moves": [list(m) for m in self.moves],
            "skin_id": self.skin_id,
            "difficulty": self.difficulty.value,
            "turn_count": self.turn_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameRecord":
        return cls(
            id=str(data["id"]),
            date=str(data.get("date", "")),
            winner=data["winner"],
            moves=data.get("moves", []),
            skin_id=str(data.get("skin_id", "clay")),
            difficulty=data.get("difficulty", Difficulty.EASY.value),
        )


def record_game(
    history: List[GameRecord],
    record: GameRecord,
    max_records: int = MAX_RECORDS,
) -> List[GameRecord]:
    """Return history with ``record`` first, keeping the newest ``max_records``."""
    return [record, *history][:max_records]


def board_at(record: GameRecord, step: int) -> np.ndarray:
    """Board after the first ``step`` moves of ``record`` (clamped to the game length)."""
    step = max(0, min(step, len(record.moves)))
    return replay_moves(record.moves[:step])


@dataclass
class ReplayCursor:
    """
    Scrubbing state for viewing a stored game.

    ``step`` is the number of moves shown, from 0 (empty board) to the
    length of the game.
    """

    record: GameRecord
    step: int = 0
    playing: bool = field(default=False)

    @property
    def total_steps(self) -> int:
        return len(self.record.moves)

    def board(self) -> np.ndarray:
        return board_at(self.record, self.step)

    def start(self) -> None:
        self.step = 0
        self.playing = False

    def prev(self) -> None:
        self.step = max(0, self.step - 1)
        self.playing = False

    def next(self) -> None:
        self.step = min(self.total_steps, self.step + 1)
        self.playing = False

    def end(self) -> None:
        self.step = self.total_steps
        self.playing = False

    def toggle_play(self) -> None:
        if self.step >= self.total_steps:
            self.step = 0
            self.playing = True
        else:
            self.playing = not self.playing

    def advance(self) -> bool:
        """One autoplay tick. Returns False (and stops) once the end is reached."""
        if not self.playing:
            return False
        if self.step >= self.total_steps:
            self.playing = False
            return False
        self.step += 1
        return True
