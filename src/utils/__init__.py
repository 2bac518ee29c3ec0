"""Utility modules."""

from .metrics import MetricsLogger
from .serialization import save_profile, load_profile

__all__ = ["MetricsLogger", "save_profile", "load_profile"]
