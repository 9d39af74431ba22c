"""
Service for deriving gamification levels and tier names from points.
"""
from typing import Tuple

from services.exceptions import InvalidScoreError


class LevelService:
    """Maps a point total to a level number and a named tier."""

    POINTS_PER_LEVEL = 50

    # Reference weights of the point colors (not used to compute totals)
    BLUE_POINT_VALUE = 40
    GREEN_POINT_VALUE = 30

    # (minimum level, tier name), highest first
    TIERS = (
        (200, "Maître Suprême"),
        (150, "Maître"),
        (100, "Expert"),
        (75, "Avancé"),
        (50, "Confirmé"),
        (30, "Intermédiaire"),
        (20, "Apprenti"),
        (10, "Novice"),
        (5, "Débutant"),
    )
    DEFAULT_TIER = "Nouveau"

    @staticmethod
    def tier_for_level(level: int) -> str:
        """Return the name of the highest tier whose threshold the level reaches."""
        for threshold, name in LevelService.TIERS:
            if level >= threshold:
                return name
        return LevelService.DEFAULT_TIER

    @staticmethod
    def classify(total_points: int) -> Tuple[int, str]:
        """
        Compute level and tier name for a point total.

        Args:
            total_points: Non-negative point total

        Returns:
            Tuple of (level, tier_name)

        Raises:
            InvalidScoreError: If total_points is negative
        """
        if total_points < 0:
            raise InvalidScoreError(f"Point total cannot be negative: {total_points}")

        level = total_points // LevelService.POINTS_PER_LEVEL
        return level, LevelService.tier_for_level(level)

    @staticmethod
    def points_to_next_level(total_points: int) -> int:
        """Points still needed to reach the next level (1..POINTS_PER_LEVEL)."""
        if total_points < 0:
            raise InvalidScoreError(f"Point total cannot be negative: {total_points}")
        return LevelService.POINTS_PER_LEVEL - total_points % LevelService.POINTS_PER_LEVEL
