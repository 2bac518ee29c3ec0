"""Registry of computer opponents keyed by difficulty id."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable


AgentFactory = Callable[..., Any]

_AGENT_REGISTRY: Dict[str, AgentFactory] = {}


def register_agent(agent_id: str, ctor: AgentFactory) -> None:
    """Register an agent constructor under a difficulty id."""
    if agent_id in _AGENT_REGISTRY:
        raise ValueError(f"Agent id '{agent_id}' is already registered.")
    _AGENT_REGISTRY[agent_id] = ctor


def make_agent(agent_id: str, **kwargs: Any) -> Any:
    """Build the opponent registered under ``agent_id``."""
    return get_agent_entry(agent_id)(**kwargs)


def list_agents() -> Iterable[str]:
    return tuple(_AGENT_REGISTRY)


def get_agent_entry(agent_id: str) -> AgentFactory:
    try:
        return _AGENT_REGISTRY[agent_id]
    except KeyError:
        raise KeyError(f"Agent id '{agent_id}' is not registered.") from None
