"""Tests for the agent registry."""

from __future__ import annotations

from uuid import uuid4

import pytest

from src.registry import get_agent_entry, list_agents, make_agent, register_agent
import src.agents  # noqa: F401 - ensures default agents are registered
from src.agents import EasyAgent, HardAgent, MediumAgent


class _StubAgent:
    def __init__(self, name: str, seed: int) -> None:
        self.name = name
        self.seed = seed


def test_default_entries():
    assert {"easy", "medium", "hard"} <= set(list_agents())
    assert isinstance(make_agent("easy", seed=1), EasyAgent)
    assert isinstance(make_agent("medium", seed=1), MediumAgent)
    assert isinstance(make_agent("hard", seed=1, exact_ties=True), HardAgent)


def test_register_and_make_agent():
    agent_id = f"stub_agent_{uuid4().hex}"
    register_agent(agent_id, _StubAgent)

    instance = make_agent(agent_id, name="test", seed=1)
    assert isinstance(instance, _StubAgent)
    assert instance.name == "test"
    assert get_agent_entry(agent_id) is _StubAgent

    with pytest.raises(ValueError):
        register_agent(agent_id, _StubAgent)


def test_unknown_ids():
    with pytest.raises(KeyError):
        make_agent("grandmaster")
