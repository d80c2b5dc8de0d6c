"""Data models for natives-tui."""

from .native import MatchResult, Native
from .result_row import ResultRow

__all__ = [
    "MatchResult",
    "Native",
    "ResultRow",
]
