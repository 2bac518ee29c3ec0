"""Reward configuration for finished games."""

from dataclasses import dataclass


@dataclass
class RewardConfig:
    """
    Coins and rank experience handed out when a game ends.

    Attributes:
        win_coins: Coins for a victory (default: 50)
        loss_coins: Coins for a loss or draw (default: 10)
        win_xp: Rank progress for a victory (default: 25)
        loss_xp: Rank progress for a loss or draw (default: 5)
        rank_up_threshold: Progress needed for the next rank (default: 100)
        daily_goal: Victories that fill the daily bowl (default: 3)
        starting_coins: Coins of a fresh profile (default: 100)
    """
    win_coins: int = 50
    loss_coins: int = 10
    win_xp: int = 25
    loss_xp: int = 5
    rank_up_threshold: int = 100
    daily_goal: int = 3
    starting_coins: int = 100

    def __post_init__(self) -> None:
        if self.rank_up_threshold <= 0:
            raise ValueError("rank_up_threshold must be positive")
        if self.daily_goal < 0:
            raise ValueError("daily_goal must be non-negative")
