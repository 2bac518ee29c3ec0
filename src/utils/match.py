"""Utilities for playing matches between agents."""

import random
import time
from typing import List, Optional, Tuple, Union

from src.agents import BaseAgent
from src.envs import GomokuEnv
from src.utils.metrics import MetricsLogger


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 10,
    seed: Optional[int] = None,
    randomize_first_player: bool = False,
    collect_episode_lengths: bool = False,
    metrics_logger: Optional[MetricsLogger] = None,
    env: Optional[GomokuEnv] = None,
) -> Union[Tuple[int, int, int], Tuple[int, int, int, List[int]]]:
    """
    Play a match between two agents.

    Args:
        agent1: First agent
        agent2: Second agent
        num_games: Number of games to play
        seed: Seed for choosing who goes first
        randomize_first_player: If True, randomly choose who goes first each game.
                               If False, agent1 always goes first (as black).
        collect_episode_lengths: If True, also return episode lengths.
        metrics_logger: Optional logger receiving one row per game.
        env: Optional environment to use. If None, creates a GomokuEnv.

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins). If ``collect_episode_lengths`` is True,
        also returns a list with the number of half-moves (ply) for every game played.
    """
    if env is None:
        env = GomokuEnv(seed=seed)
    rng = random.Random(seed)

    agent1_wins = 0
    draws = 0
    agent2_wins = 0
    episode_lengths: List[int] = []

    for _ in range(num_games):
        env.reset()
        agent1_is_black = rng.random() < 0.5 if randomize_first_player else True
        started = time.perf_counter()

        done = False
        info = {}
        while not done:
            # black is token 1
            agent1_to_move = (env.current_player_token == 1) == agent1_is_black
            agent = agent1 if agent1_to_move else agent2
            move = agent.select_move(env.board, env.current_player_token)
            result = env.step(move)
            if result.info["invalid_action"]:
                raise ValueError(f"Agent {type(agent).__name__} played an illegal move {move}")
            done, info = result.done, result.info

        winner = info["winner"]
        if winner == 0:
            draws += 1
            outcome = "draw"
        elif (winner == 1) == agent1_is_black:
            agent1_wins += 1
            outcome = "agent1"
        else:
            agent2_wins += 1
            outcome = "agent2"

        moves = len(env.move_log)
        episode_lengths.append(moves)
        if metrics_logger is not None:
            metrics_logger.log_dict(
                {
                    "winner": outcome,
                    "agent1_black": agent1_is_black,
                    "moves": moves,
                    "seconds": round(time.perf_counter() - started, 4),
                }
            )

    if collect_episode_lengths:
        return agent1_wins, draws, agent2_wins, episode_lengths
    return agent1_wins, draws, agent2_wins
