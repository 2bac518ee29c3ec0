"""Configuration schema for matches and the player profile."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from src.games.gomoku import Difficulty
from src.progression import RewardConfig


@dataclass
class MatchConfig:
    difficulty: Difficulty = Difficulty.MEDIUM
    human_first: bool = True
    seed: Optional[int] = None


@dataclass
class ClockConfig:
    human_seconds: float = 30.0
    ai_seconds: float = 3.0


@dataclass
class HistoryConfig:
    max_records: int = 20


@dataclass
class AppConfig:
    match: MatchConfig = field(default_factory=MatchConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    rewards: RewardConfig = field(default_factory=RewardConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    profile_path: str = "data/profile.json"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        match_data = data.get("match") or {}
        try:
            difficulty = Difficulty(match_data.get("difficulty", Difficulty.MEDIUM.value))
        except ValueError:
            raise ValueError(f"Unknown difficulty: {match_data.get('difficulty')!r}") from None
        seed = match_data.get("seed")
        if seed is not None:
            seed = int(seed)
        match = MatchConfig(
            difficulty=difficulty,
            human_first=bool(match_data.get("human_first", True)),
            seed=seed,
        )

        clock_data = data.get("clock") or {}
        clock = ClockConfig(
            human_seconds=float(clock_data.get("human_seconds", 30.0)),
            ai_seconds=float(clock_data.get("ai_seconds", 3.0)),
        )

        rewards_data = data.get("rewards") or {}
        unknown = sorted(set(rewards_data) - {f.name for f in fields(RewardConfig)})
        if unknown:
            raise ValueError(f"Unknown rewards keys: {unknown}")
        rewards = RewardConfig(**rewards_data)

        history_data = data.get("history") or {}
        max_records = int(history_data.get("max_records", 20))
        if max_records < 1:
            raise ValueError("history.max_records must be at least 1")
        history = HistoryConfig(max_records=max_records)

        return cls(
            match=match,
            clock=clock,
            rewards=rewards,
            history=history,
            profile_path=str(data.get("profile_path", "data/profile.json")),
        )


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
