"""Per-turn countdown used by the turn driver to force moves."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TurnClock:
    """
    Countdown for the side to move.

    The human gets ``human_seconds`` per turn and the computer
    ``ai_seconds``. When ``tick`` reports expiry, the driver plays an
    engine move for whoever is on turn.
    """

    human_seconds: float = 30.0
    ai_seconds: float = 3.0
    time_left: float = 0.0
    paused: bool = False

    def __post_init__(self) -> None:
        if self.human_seconds <= 0 or self.ai_seconds <= 0:
            raise ValueError("turn budgets must be positive")

    def start_turn(self, is_human: bool) -> None:
        self.time_left = self.human_seconds if is_human else self.ai_seconds

    def tick(self, seconds: float = 1.0) -> bool:
        """Consume ``seconds`` of the budget; True once the turn has run out."""
        if self.paused:
            return False
        self.time_left = max(self.time_left - seconds, 0.0)
        return self.expired

    @property
    def expired(self) -> bool:
        return not self.paused and self.time_left <= 0.0

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused
