"""CLI for playing computer vs computer."""

import sys
from pathlib import Path
from typing import Literal, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro

from src.registry import make_agent
from src.envs import GomokuEnv
from src.utils import MetricsLogger
from src.utils.match import play_match


def play_agent_vs_agent(
    agent1_type: Literal["easy", "medium", "hard"],
    agent2_type: Literal["easy", "medium", "hard"],
    num_games: int = 10,
    randomize_first_player: bool = True,
    render: bool = False,
    log_dir: Optional[str] = None,
    seed: int = 42,
):
    """
    Play computer vs computer games.

    Args:
        agent1_type: Strength of agent1
        agent2_type: Strength of agent2
        num_games: Number of games to play
        randomize_first_player: Randomly choose who plays black each game
        render: Print the final board of every game
        log_dir: Directory for a per-game CSV log (no log if omitted)
        seed: Random seed
    """
    agent1 = make_agent(agent1_type, seed=seed)
    agent2 = make_agent(agent2_type, seed=seed + 1)
    env = GomokuEnv(seed=seed)

    print("=" * 50)
    print("Gomoku - Agent vs Agent")
    print("=" * 50)
    print(f"Agent 1: {agent1_type}")
    print(f"Agent 2: {agent2_type}")
    print(f"Games: {num_games}")
    print("=" * 50)

    logger = MetricsLogger(log_dir=log_dir, prefix="match") if log_dir else None
    try:
        if render:
            wins1 = draws = wins2 = 0
            lengths = []
            for game_idx in range(num_games):
                w1, d, w2, game_lengths = play_match(
                    agent1,
                    agent2,
                    num_games=1,
                    seed=seed + game_idx,
                    randomize_first_player=randomize_first_player,
                    collect_episode_lengths=True,
                    metrics_logger=logger,
                    env=env,
                )
                wins1, draws, wins2 = wins1 + w1, draws + d, wins2 + w2
                lengths.extend(game_lengths)
                print(f"\nGame {game_idx + 1}:")
                env.render()
        else:
            wins1, draws, wins2, lengths = play_match(
                agent1,
                agent2,
                num_games=num_games,
                seed=seed,
                randomize_first_player=randomize_first_player,
                collect_episode_lengths=True,
                metrics_logger=logger,
                env=env,
            )
    finally:
        if logger is not None:
            logger.close()

    print()
    print("=" * 50)
    print("Final Results")
    print("=" * 50)
    print(f"Agent 1 ({agent1_type}) wins: {wins1}")
    print(f"Agent 2 ({agent2_type}) wins: {wins2}")
    print(f"Draws: {draws}")
    if lengths:
        print(f"Average game length: {sum(lengths) / len(lengths):.1f} moves")
    if logger is not None:
        print(f"Per-game log: {logger.csv_path}")


if __name__ == "__main__":
    tyro.cli(play_agent_vs_agent)
