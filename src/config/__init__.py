"""Config package exports."""

from .schema import (
    AppConfig,
    ClockConfig,
    HistoryConfig,
    MatchConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "ClockConfig",
    "HistoryConfig",
    "MatchConfig",
    "load_config",
]
