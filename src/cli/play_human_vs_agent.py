"""CLI for playing against the computer."""

import sys
import time
from pathlib import Path
from typing import Literal, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro

from src.config import AppConfig, load_config
from src.envs import GomokuEnv, TurnClock
from src.games.gomoku import BLACK, WHITE, Difficulty, Move
from src.utils import load_profile, save_profile


def _read_move(prompt: str) -> Optional[Move]:
    raw = input(prompt).replace(",", " ").split()
    if len(raw) != 2:
        return None
    try:
        return Move(int(raw[0], 16), int(raw[1], 16))
    except ValueError:
        return None


def play_human_vs_agent(
    difficulty: Optional[Literal["easy", "medium", "hard"]] = None,
    config: Optional[str] = None,
    human_first: Optional[bool] = None,
    seed: Optional[int] = None,
    save: bool = True,
):
    """
    Play a game of Gomoku against the computer.

    Args:
        difficulty: Opponent strength (overrides the config)
        config: Path to a YAML config
        human_first: Whether the human plays black and moves first (overrides the config)
        seed: Random seed for the computer's tie-breaking (overrides the config)
        save: Whether to book the result into the player profile
    """
    cfg = load_config(config) if config else AppConfig()
    level = Difficulty(difficulty) if difficulty else cfg.match.difficulty
    human_first = cfg.match.human_first if human_first is None else human_first
    seed = cfg.match.seed if seed is None else seed

    env = GomokuEnv(seed=seed)
    clock = TurnClock(human_seconds=cfg.clock.human_seconds, ai_seconds=cfg.clock.ai_seconds)
    human_side = BLACK if human_first else WHITE

    print("=" * 50)
    print("Gomoku - Human vs Computer")
    print("=" * 50)
    print(f"Difficulty: {level.value}")
    print(f"Human plays: {'first (X)' if human_first else 'second (O)'}")
    print(f"Time per move: {cfg.clock.human_seconds:g}s (out of time -> the computer moves for you)")
    print("Enter moves as 'row col' in hex (0-e).")
    print("=" * 50)
    print()

    env.reset()
    done = False
    info = {}

    while not done:
        env.render()
        is_human = env.current_player_token == human_side
        clock.start_turn(is_human)

        if is_human:
            while True:
                started = time.monotonic()
                move = _read_move("Your move: ")
                if clock.tick(time.monotonic() - started):
                    print("Out of time! Playing an automatic move for you.")
                    result = env.engine_move(level)
                    break
                if move is None:
                    print("Please enter two hex numbers, e.g. '7 7'.")
                    continue
                result = env.step(move)
                if not result.info["invalid_action"]:
                    break
                print(f"Cell {tuple(move)} is not available.")
        else:
            print("Computer's turn...")
            started = time.monotonic()
            result = env.engine_move(level)
            move = env.last_move
            print(f"Computer plays: {move.row:x} {move.col:x}")
            if clock.tick(time.monotonic() - started):
                print(f"Warning: the computer went over its {cfg.clock.ai_seconds:g}s budget.")

        done, info = result.done, result.info
        print()

    env.render()
    winner = info.get("winner")
    if winner == human_side:
        print("You win! 🎉")
    elif winner == 0:
        print("It's a draw! 🤝")
    else:
        print("Computer wins! 😢")

    if save:
        profile = load_profile(cfg.profile_path, cfg.rewards)
        profile.finish_game(
            winner=winner,
            human_side=human_side,
            moves=env.move_log,
            difficulty=level,
            rewards=cfg.rewards,
            max_records=cfg.history.max_records,
        )
        save_profile(profile, cfg.profile_path)
        stats = profile.stats
        print(
            f"Coins: {stats.coins} | Rank: {stats.rank_title} ({stats.rank_progress}%) "
            f"| Daily wins: {stats.daily_progress}/{cfg.rewards.daily_goal}"
        )


if __name__ == "__main__":
    tyro.cli(play_human_vs_agent)
