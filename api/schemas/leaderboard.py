"""
Pydantic schemas for leaderboard records, entries and responses.
"""
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, populated by either name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ScoreRecord(CamelModel):
    """Per-user point tally as read from the score store."""
    user_id: str
    name: str = ""
    total_points: int = 0
    blue_points: int = 0
    green_points: int = 0
    answered_count: int = 0


class RankedEntry(CamelModel):
    """Single ranked row of a leaderboard. Built fresh for every query."""
    user_id: str
    name: str
    total_points: int
    blue_points: int
    green_points: int
    answered_count: int
    rank: int
    level: int
    tier_name: str
    percentage_answered: int
    is_current_user: bool = False


class LeaderboardView(CamelModel):
    """Response containing the top window and, if needed, the requester's own row."""
    sort_key: str
    window: list[RankedEntry]
    pinned_user: Optional[RankedEntry] = None  # Requester's entry when ranked outside the window
    total_questions_in_system: int = 0
    total_participants: int = 0


class LeaderboardStats(CamelModel):
    """Population summary shown on the admin analytics page."""
    total_users: int
    top_points: int
    average_points: int


class PopulationFilter(CamelModel):
    """
    Optional restriction of the ranked population.

    Ranks are computed within the filtered population. "All" and blank
    values mean no restriction, as on the admin leaderboard page.
    """
    semester: Optional[str] = None
    student_year: Optional[str] = None
    search: Optional[str] = None  # Case-insensitive match on name or username

    @field_validator("semester", "student_year", "search")
    @classmethod
    def _blank_means_all(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value or value.lower() == "all":
            return None
        return value

    @property
    def is_empty(self) -> bool:
        return self.semester is None and self.student_year is None and self.search is None
