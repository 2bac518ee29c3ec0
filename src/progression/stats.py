"""Rank, coin and daily-goal bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .reward_config import RewardConfig

RANKS = (
    "Cardboard Box",
    "Window Sill",
    "Comfy Cushion",
    "Heated Blanket",
    "Sunbeam God",
)


@dataclass
class PlayerStats:
    rank_level: int = 0
    rank_progress: int = 0
    coins: int = 100
    daily_progress: int = 0

    @property
    def rank_title(self) -> str:
        return RANKS[self.rank_level]


def apply_game_result(
    stats: PlayerStats,
    victory: bool,
    rewards: Optional[RewardConfig] = None,
) -> PlayerStats:
    """
    Return new stats after a finished game.

    Draws and losses both earn the consolation rewards. One threshold's
    worth of progress is converted into a rank level per game; the level
    stops at the last rank.
    """
    if rewards is None:
        rewards = RewardConfig()

    coins = rewards.win_coins if victory else rewards.loss_coins
    xp = rewards.win_xp if victory else rewards.loss_xp

    progress = stats.rank_progress + xp
    level = stats.rank_level
    if progress >= rewards.rank_up_threshold:
        progress -= rewards.rank_up_threshold
        level = min(level + 1, len(RANKS) - 1)

    daily = stats.daily_progress
    if victory:
        daily = min(daily + 1, rewards.daily_goal)

    return replace(
        stats,
        coins=stats.coins + coins,
        rank_progress=progress,
        rank_level=level,
        daily_progress=daily,
    )
