"""
Leaderboard façade: store read, ranking, classification and windowing.
"""
from typing import Optional
import logging

from schemas import LeaderboardStats, LeaderboardView, PopulationFilter, RankedEntry
from services.ranking_service import RankingService
from services.score_store import ScoreRecordStore
from services.view_builder import LeaderboardViewBuilder

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Answers leaderboard queries from a single read of the score store."""

    def __init__(self, store: ScoreRecordStore):
        self.store = store

    def get_leaderboard(
        self,
        window_size: int,
        sort_key: str = RankingService.SORT_TOTAL_POINTS,
        requester_id: Optional[str] = None,
        filters: Optional[PopulationFilter] = None,
    ) -> LeaderboardView:
        """
        Compute the leaderboard view for one request.

        Arguments are validated before the store is read. Store failures are
        raised as StoreUnavailableError and not retried.

        Args:
            window_size: Number of top entries to return (must be > 0)
            sort_key: One of RankingService.VALID_SORT_KEYS
            requester_id: Id of the user asking, pinned if outside the window
            filters: Optional population restriction; ranks are computed within it

        Returns:
            LeaderboardView

        Raises:
            InvalidArgumentError: Bad window size
            UnknownSortKeyError: Unsupported sort key
            StoreUnavailableError: Store could not be read
            InvalidScoreError: A record has a negative counter
        """
        LeaderboardViewBuilder.validate_window_size(window_size)
        RankingService.validate_sort_key(sort_key)

        records, total_questions = self.store.list_all(filters)
        ranked = RankingService.rank(records, sort_key, total_questions)

        view = LeaderboardViewBuilder.build_view(
            ranked,
            window_size,
            requester_id=requester_id,
            total_questions=total_questions,
            sort_key=sort_key,
        )

        logger.info(
            f"Built leaderboard: sort={sort_key}, window={len(view.window)}/{window_size}, "
            f"participants={view.total_participants}, pinned={view.pinned_user is not None}"
        )

        return view

    def get_user_ranking(
        self,
        user_id: str,
        sort_key: str = RankingService.SORT_TOTAL_POINTS,
        filters: Optional[PopulationFilter] = None,
    ) -> Optional[RankedEntry]:
        """
        Get a single user's entry, or None if the user is not ranked (or filtered out).
        """
        RankingService.validate_sort_key(sort_key)

        records, total_questions = self.store.list_all(filters)
        ranked = RankingService.rank(records, sort_key, total_questions)

        return ranked.find(user_id)

    def get_stats(self, filters: Optional[PopulationFilter] = None) -> LeaderboardStats:
        """Summarize the ranked population."""
        records, _ = self.store.list_all(filters)
        return RankingService.summarize(records)
