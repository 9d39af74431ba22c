"""
Pydantic schemas for request/response validation.
"""
from .leaderboard import (
    ScoreRecord,
    RankedEntry,
    LeaderboardView,
    LeaderboardStats,
    PopulationFilter,
)

__all__ = [
    "ScoreRecord",
    "RankedEntry",
    "LeaderboardView",
    "LeaderboardStats",
    "PopulationFilter",
]
