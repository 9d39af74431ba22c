"""
Builds the windowed leaderboard payload from a ranked list.
"""
from typing import Optional

from schemas import LeaderboardView, RankedEntry
from services.exceptions import InvalidArgumentError
from services.ranking_service import RankedList, RankingService


class LeaderboardViewBuilder:
    """Slices the top of a ranking and pins the requester when needed."""

    @staticmethod
    def validate_window_size(window_size) -> int:
        """
        Raises:
            InvalidArgumentError: If window_size is not a positive integer
        """
        if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size <= 0:
            raise InvalidArgumentError(f"Window size must be a positive integer, got {window_size!r}")
        return window_size

    @staticmethod
    def parse_window_size(raw) -> int:
        """
        Convert a window size received as text (e.g. a query string) to an int.

        Raises:
            InvalidArgumentError: If the value is not a positive integer
        """
        if isinstance(raw, str):
            try:
                raw = int(raw.strip())
            except ValueError:
                raise InvalidArgumentError(f"Window size must be a positive integer, got {raw!r}")
        return LeaderboardViewBuilder.validate_window_size(raw)

    @staticmethod
    def _mark_current(entry: RankedEntry) -> RankedEntry:
        return entry.model_copy(update={"is_current_user": True})

    @staticmethod
    def build_view(
        ranked: RankedList,
        window_size: int,
        requester_id: Optional[str] = None,
        total_questions: int = 0,
        sort_key: str = RankingService.SORT_TOTAL_POINTS,
    ) -> LeaderboardView:
        """
        Build the "top N plus me" view.

        - window: first min(N, len(ranked)) entries, in rank order
        - pinned_user: the requester's entry when its rank is above N,
          with its global rank; None when the requester is in the window,
          absent from the ranking, or not given

        The ranked list is never modified; the requester's row is copied
        before being flagged as the current user.

        Raises:
            InvalidArgumentError: If window_size is not a positive integer
        """
        LeaderboardViewBuilder.validate_window_size(window_size)

        window = list(ranked[:window_size])
        pinned_user = None

        requester_entry = ranked.find(requester_id)
        if requester_entry is not None:
            if requester_entry.rank <= window_size:
                position = requester_entry.rank - 1
                window[position] = LeaderboardViewBuilder._mark_current(window[position])
            else:
                pinned_user = LeaderboardViewBuilder._mark_current(requester_entry)

        return LeaderboardView(
            sort_key=sort_key,
            window=window,
            pinned_user=pinned_user,
            total_questions_in_system=total_questions,
            total_participants=len(ranked),
        )
