"""
Service for ordering score records into a ranked leaderboard.
"""
from collections.abc import Sequence
from typing import Dict, Iterable, List, Optional
import logging

from schemas import LeaderboardStats, RankedEntry, ScoreRecord
from services.exceptions import InvalidScoreError, UnknownSortKeyError
from services.level_service import LevelService

logger = logging.getLogger(__name__)


class RankedList(Sequence):
    """
    Immutable ranked sequence with an id index.

    The index is built once when the list is created so that looking up a
    single user never rescans the entries.
    """

    def __init__(self, entries: Iterable[RankedEntry] = ()):
        self._entries = tuple(entries)
        self._by_user_id: Dict[str, RankedEntry] = {
            entry.user_id: entry for entry in self._entries
        }

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"<RankedList(size={len(self._entries)})>"

    def find(self, user_id: Optional[str]) -> Optional[RankedEntry]:
        """Return the entry for user_id, or None if absent."""
        if user_id is None:
            return None
        return self._by_user_id.get(user_id)


class RankingService:
    """Service for ranking users by their gamification points."""

    SORT_TOTAL_POINTS = "totalPoints"
    SORT_BLUE_POINTS = "bluePoints"
    SORT_GREEN_POINTS = "greenPoints"
    SORT_PERCENTAGE_ANSWERED = "percentageAnswered"

    VALID_SORT_KEYS = (
        SORT_TOTAL_POINTS,
        SORT_BLUE_POINTS,
        SORT_GREEN_POINTS,
        SORT_PERCENTAGE_ANSWERED,
    )

    @staticmethod
    def validate_sort_key(sort_key: str) -> str:
        """
        Check that sort_key is one of VALID_SORT_KEYS.

        Raises:
            UnknownSortKeyError: If the key is not supported
        """
        if sort_key not in RankingService.VALID_SORT_KEYS:
            raise UnknownSortKeyError(sort_key, RankingService.VALID_SORT_KEYS)
        return sort_key

    @staticmethod
    def compute_percentage(answered_count: int, total_questions: int) -> int:
        """
        Percentage of the question bank a user has answered, rounded half up.

        A stale read can report more answers than questions; the count is
        clamped so the result always stays within 0..100.
        """
        if total_questions <= 0:
            return 0
        answered = min(max(answered_count, 0), total_questions)
        return (200 * answered + total_questions) // (2 * total_questions)

    @staticmethod
    def check_record(record: ScoreRecord):
        """
        Reject records with negative counters.

        Raises:
            InvalidScoreError: If any counter is negative
        """
        for field in ("total_points", "blue_points", "green_points", "answered_count"):
            value = getattr(record, field)
            if value < 0:
                raise InvalidScoreError(
                    f"Score record for user {record.user_id} has negative {field}: {value}"
                )

    @staticmethod
    def rank(
        records: Sequence,
        sort_key: str = SORT_TOTAL_POINTS,
        total_questions: int = 0,
    ) -> RankedList:
        """
        Order records by sort_key and assign dense 1-based ranks.

        Equal sort values are broken by total_points (descending), then by
        user_id (ascending), so every record gets a distinct rank and repeated
        calls on the same data always agree.

        Args:
            records: ScoreRecord objects for the whole population
            sort_key: One of VALID_SORT_KEYS
            total_questions: Number of questions in the system

        Returns:
            RankedList of RankedEntry, rank 1 first

        Raises:
            UnknownSortKeyError: If sort_key is not supported
            InvalidScoreError: If a record or total_questions is negative
        """
        RankingService.validate_sort_key(sort_key)

        if total_questions < 0:
            raise InvalidScoreError(f"Total questions cannot be negative: {total_questions}")

        if not records:
            return RankedList()

        # Pair each record with its percentage so it's computed only once
        scored = []
        for record in records:
            RankingService.check_record(record)
            percentage = RankingService.compute_percentage(record.answered_count, total_questions)
            scored.append((record, percentage))

        if sort_key == RankingService.SORT_PERCENTAGE_ANSWERED:
            def sort_value(item):
                return item[1]
        else:
            attribute = {
                RankingService.SORT_TOTAL_POINTS: "total_points",
                RankingService.SORT_BLUE_POINTS: "blue_points",
                RankingService.SORT_GREEN_POINTS: "green_points",
            }[sort_key]

            def sort_value(item):
                return getattr(item[0], attribute)

        scored.sort(key=lambda item: (-sort_value(item), -item[0].total_points, item[0].user_id))

        entries: List[RankedEntry] = []
        for position, (record, percentage) in enumerate(scored, start=1):
            level, tier_name = LevelService.classify(record.total_points)
            entries.append(RankedEntry(
                user_id=record.user_id,
                name=record.name,
                total_points=record.total_points,
                blue_points=record.blue_points,
                green_points=record.green_points,
                answered_count=record.answered_count,
                rank=position,
                level=level,
                tier_name=tier_name,
                percentage_answered=percentage,
            ))

        logger.info(f"Ranked {len(entries)} users by {sort_key}")

        return RankedList(entries)

    @staticmethod
    def summarize(records: Sequence) -> LeaderboardStats:
        """
        Summarize the population: user count, best total and mean total.

        The mean is rounded half up to a whole number of points.

        Raises:
            InvalidScoreError: If a record has a negative counter
        """
        if not records:
            return LeaderboardStats(total_users=0, top_points=0, average_points=0)

        for record in records:
            RankingService.check_record(record)

        totals = [record.total_points for record in records]
        count = len(totals)
        return LeaderboardStats(
            total_users=count,
            top_points=max(totals),
            average_points=(2 * sum(totals) + count) // (2 * count),
        )
