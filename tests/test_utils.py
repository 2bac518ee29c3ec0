"""Tests for utilities."""

import csv
import tempfile

import pytest

from src.agents import EasyAgent, HardAgent, MediumAgent
from src.utils import MetricsLogger
from src.utils.match import play_match


def test_metrics_logger():
    """Test metrics logger."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with MetricsLogger(log_dir=tmpdir, prefix="match") as logger:
            logger.log_dict({"winner": "agent1", "moves": 21})
            logger.log_dict({"winner": "draw", "moves": 225})
            logger.log_dict({"winner": "agent1"}, step=10)

            assert logger.get_metric("moves") == [(0, 21), (1, 225)]
            assert logger.summary("winner", ["agent1", "agent2", "draw"]) == {
                "agent1": 2,
                "agent2": 0,
                "draw": 1,
            }
            with pytest.raises(ValueError):
                logger.log_dict({"unknown": 1})

        with open(logger.csv_path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [row["step"] for row in rows] == ["0", "1", "10"]
        assert rows[2]["moves"] == ""


def test_play_match_counts_every_game():
    wins1, draws, wins2, lengths = play_match(
        MediumAgent(seed=0),
        EasyAgent(seed=1),
        num_games=3,
        seed=5,
        randomize_first_player=True,
        collect_episode_lengths=True,
    )
    assert wins1 + draws + wins2 == 3
    assert len(lengths) == 3
    assert all(9 <= n <= 225 for n in lengths)


def test_play_match_logs_games():
    with tempfile.TemporaryDirectory() as tmpdir:
        with MetricsLogger(log_dir=tmpdir) as logger:
            result = play_match(HardAgent(seed=0), EasyAgent(seed=0), num_games=2, seed=1, metrics_logger=logger)
            outcomes = [v for _, v in logger.get_metric("winner")]

    assert len(result) == 3
    assert len(outcomes) == 2
    assert all(o in {"agent1", "agent2", "draw"} for o in outcomes)
    assert outcomes.count("agent1") == result[0]
