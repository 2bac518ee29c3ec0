"""Serialization utilities for player profiles."""

import json
import os
from pathlib import Path
from typing import Union

from src.progression import PlayerProfile, RewardConfig


def save_profile(profile: PlayerProfile, path: Union[str, Path]) -> None:
    """
    Save a profile to a JSON file.

    Args:
        profile: Profile to save
        path: Path to save file (parent directories are created)
    """
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w") as f:
        json.dump(profile.to_dict(), f, indent=2)
    os.replace(tmp_path, path)


def load_profile(path: Union[str, Path], rewards: RewardConfig = None) -> PlayerProfile:
    """
    Load a profile from a JSON file.

    Args:
        path: Path to load file from
        rewards: Used for the starting coins when no save exists yet

    Returns:
        Loaded profile, or a fresh one if ``path`` does not exist
    """
    path = Path(path)
    if not path.exists():
        return PlayerProfile.new(rewards)
    with path.open() as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a JSON object, got {type(data)}")
    return PlayerProfile.from_dict(data)
