"""Move evaluation helpers for the computer opponents."""

from .patterns import (
    LineInfo,
    evaluate_cell,
    find_winning_move,
    line_info,
    max_chain_length,
    pattern_score,
)

__all__ = [
    "LineInfo",
    "evaluate_cell",
    "find_winning_move",
    "line_info",
    "max_chain_length",
    "pattern_score",
]
