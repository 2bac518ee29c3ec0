"""Meta-game state around matches: rewards, ranks, skins and history."""

from .history import DRAW, GameRecord, ReplayCursor, board_at, record_game
from .profile import PlayerProfile
from .reward_config import RewardConfig
from .shop import SKINS, Skin, get_skin
from .stats import RANKS, PlayerStats, apply_game_result

__all__ = [
    "DRAW",
    "GameRecord",
    "PlayerProfile",
    "PlayerStats",
    "RANKS",
    "ReplayCursor",
    "RewardConfig",
    "SKINS",
    "Skin",
    "apply_game_result",
    "board_at",
    "get_skin",
    "record_game",
]
