"""
Errors raised by the leaderboard services.
"""


class LeaderboardError(Exception):
    """Base class for leaderboard errors."""


class InvalidArgumentError(LeaderboardError):
    """A query argument (window size, sort key) was rejected."""


class UnknownSortKeyError(InvalidArgumentError):
    """The requested sort key is not one of the supported keys."""

    def __init__(self, sort_key: str, valid_keys):
        self.sort_key = sort_key
        super().__init__(
            f"Invalid sort key '{sort_key}'. Must be one of: {', '.join(valid_keys)}"
        )


class StoreUnavailableError(LeaderboardError):
    """The score store could not be read."""


class InvalidScoreError(LeaderboardError):
    """A score record violates the non-negativity invariant."""
