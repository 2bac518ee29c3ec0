from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Optional, Sequence, TypeVar

S = TypeVar("S")  # тип состояния
A = TypeVar("A", bound=Hashable)  # тип хода, для гомоку это клетка (row, col)


class TurnBasedGame(ABC, Generic[S, A]):
    """
    Общий интерфейс для детерминированной двухигровой игры с совершенной информацией.
    Никаких env, только "чистые" правила.
    """

    @abstractmethod
    def initial_state(self) -> S:
        """Начальное состояние партии."""

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[A]:
        """Все допустимые действия в данном состоянии."""

    @abstractmethod
    def apply_action(self, state: S, action: A) -> S:
        """Вернуть новое состояние после хода."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """
        Какой игрок ходит сейчас:
        1 для чёрных (ходят первыми) и -1 для белых.
        """

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Конечное ли состояние (победа/ничья)?"""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Кто победил:

        * 1  — выиграл игрок с токеном +1
        * -1 — выиграл игрок с токеном -1
        * 0  — ничья (доска заполнена)
        * None — ещё не закончено
        """
