"""Replay a stored game from the player profile in the console."""

import sys
import time
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro

from src.config import AppConfig, load_config
from src.envs import GomokuEnv
from src.progression import DRAW, ReplayCursor
from src.utils import load_profile


def replay_game(
    index: int = 0,
    config: Optional[str] = None,
    delay: float = 0.8,
    list_games: bool = False,
):
    """
    Show a game from the history move by move.

    Args:
        index: Position in the history, 0 is the most recent game
        config: Path to a YAML config (for the profile location)
        delay: Seconds between moves
        list_games: Only list the stored games
    """
    cfg = load_config(config) if config else AppConfig()
    profile = load_profile(cfg.profile_path, cfg.rewards)

    if not profile.history:
        print("No games recorded yet.")
        return

    if list_games:
        for i, record in enumerate(profile.history):
            winner = "draw" if record.winner == DRAW else ("X" if record.winner == 1 else "O")
            print(f"[{i}] {record.date}  {record.difficulty.value:<6}  winner: {winner:<4}  moves: {record.turn_count}")
        return

    if not 0 <= index < len(profile.history):
        print(f"Error: index must be between 0 and {len(profile.history) - 1}")
        sys.exit(1)

    record = profile.history[index]
    cursor = ReplayCursor(record)
    env = GomokuEnv()

    print("=" * 50)
    print(f"Replay of {record.date} ({record.difficulty.value}), {record.turn_count} moves")
    print("=" * 50)

    cursor.toggle_play()
    while cursor.advance():
        env.load_moves(record.moves[: cursor.step])
        print(f"Move {cursor.step}/{cursor.total_steps}")
        env.render()
        time.sleep(delay)


if __name__ == "__main__":
    tyro.cli(replay_game)
