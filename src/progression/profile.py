"""Player profile: stats, owned skins and game history."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from src.games.gomoku import Difficulty, MoveRecord
from .history import MAX_RECORDS, GameRecord, record_game
from .reward_config import RewardConfig
from .shop import DEFAULT_SKIN_ID, get_skin
from .stats import RANKS, PlayerStats, apply_game_result


@dataclass
class PlayerProfile:
    stats: PlayerStats = field(default_factory=PlayerStats)
    unlocked_skin_ids: List[str] = field(default_factory=lambda: [DEFAULT_SKIN_ID])
    current_skin_id: str = DEFAULT_SKIN_ID
    history: List[GameRecord] = field(default_factory=list)

    @classmethod
    def new(cls, rewards: Optional[RewardConfig] = None) -> "PlayerProfile":
        rewards = rewards or RewardConfig()
        return cls(stats=PlayerStats(coins=rewards.starting_coins))

    def buy_skin(self, skin_id: str) -> None:
        """
        Pay for ``skin_id``, unlock it and equip it.

        Raises:
            ValueError: unknown skin, already owned, or not enough coins.
        """
        skin = get_skin(skin_id)
        if skin_id in self.unlocked_skin_ids:
            raise ValueError(f"Skin '{skin_id}' is already unlocked")
        if self.stats.coins < skin.price:
            raise ValueError(
                f"Not enough coins for '{skin_id}': need {skin.price}, have {self.stats.coins}"
            )
        self.stats.coins -= skin.price
        self.unlocked_skin_ids.append(skin_id)
        self.current_skin_id = skin_id

    def equip_skin(self, skin_id: str) -> None:
        get_skin(skin_id)
        if skin_id not in self.unlocked_skin_ids:
            raise ValueError(f"Skin '{skin_id}' is locked")
        self.current_skin_id = skin_id

    def finish_game(
        self,
        winner: Optional[int],
        human_side: int,
        moves: Sequence[MoveRecord],
        difficulty: Union[Difficulty, str],
        rewards: Optional[RewardConfig] = None,
        max_records: int = MAX_RECORDS,
    ) -> GameRecord:
        """
        Book a finished game: pay out rewards and store it in the history.

        Args:
            winner: Winning token, or None/0 for a draw.
            human_side: Token the human played.
            moves: Full move log of the game.
            difficulty: Opponent strength.
            rewards: Payout table.
            max_records: History length to keep.

        Returns:
            The stored record.
        """
        record = GameRecord.create(
            winner=winner,
            moves=list(moves),
            skin_id=self.current_skin_id,
            difficulty=difficulty,
        )
        self.history = record_game(self.history, record, max_records=max_records)
        self.stats = apply_game_result(self.stats, victory=winner == human_side, rewards=rewards)
        return record

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": asdict(self.stats),
            "unlocked_skin_ids": list(self.unlocked_skin_ids),
            "current_skin_id": self.current_skin_id,
            "history": [record.to_dict() for record in self.history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerProfile":
        stats_data = data.get("stats", {})
        # out-of-range levels from damaged saves snap to the nearest rank
        rank_level = min(max(int(stats_data.get("rank_level", 0)), 0), len(RANKS) - 1)
        stats = PlayerStats(
            rank_level=rank_level,
            rank_progress=int(stats_data.get("rank_progress", 0)),
            coins=int(stats_data.get("coins", 0)),
            # older saves have no daily progress
            daily_progress=int(stats_data.get("daily_progress", 0)),
        )
        unlocked = list(data.get("unlocked_skin_ids", [DEFAULT_SKIN_ID]))
        current = data.get("current_skin_id", DEFAULT_SKIN_ID)
        if current not in unlocked:
            current = DEFAULT_SKIN_ID
        return cls(
            stats=stats,
            unlocked_skin_ids=unlocked,
            current_skin_id=current,
            history=[GameRecord.from_dict(item) for item in data.get("history", [])],
        )
