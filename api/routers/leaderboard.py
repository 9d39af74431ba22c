"""
Leaderboard endpoints - ranked views, single-user rankings and stats.
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional
import logging

from config import settings
from schemas import LeaderboardView, LeaderboardStats, PopulationFilter, RankedEntry
from services.exceptions import (
    InvalidArgumentError,
    InvalidScoreError,
    LeaderboardError,
    StoreUnavailableError,
)
from services.leaderboard_service import LeaderboardService
from services.view_builder import LeaderboardViewBuilder
from utils.dependencies import get_leaderboard_service

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_http_error(error: LeaderboardError) -> HTTPException:
    """Translate a leaderboard error into the matching HTTP response."""
    if isinstance(error, InvalidArgumentError):
        logger.warning(f"Rejected leaderboard request: {error}")
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, StoreUnavailableError):
        logger.error(f"Leaderboard store unavailable: {error}")
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error))

    if isinstance(error, InvalidScoreError):
        logger.error(f"Invalid score data: {error}")
    else:
        logger.error(f"Leaderboard computation failed: {error}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


def get_population_filter(
    semester: Optional[str] = Query(None, alias="year", description="Semester/year the users are enrolled in ('All' for everyone)"),
    student_year: Optional[str] = Query(None, alias="studentYear", description="Study year, e.g. '1st' ('All' for everyone)"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name or username"),
) -> PopulationFilter:
    """Collect the optional population filters shared by every leaderboard endpoint."""
    return PopulationFilter(semester=semester, student_year=student_year, search=search)


@router.get("", response_model=LeaderboardView)
def get_leaderboard(
    # Kept as text so non-integers get the same 400 as other bad arguments
    window_size: str = Query(str(settings.LEADERBOARD_DEFAULT_WINDOW), alias="windowSize", description="Number of top entries to return"),
    sort_key: str = Query(settings.LEADERBOARD_DEFAULT_SORT_KEY, alias="sortKey", description="totalPoints, bluePoints, greenPoints or percentageAnswered"),
    requester_id: Optional[str] = Query(None, alias="requesterId", description="Id of the requesting user"),
    filters: PopulationFilter = Depends(get_population_filter),
    service: LeaderboardService = Depends(get_leaderboard_service)
):
    """
    Get the leaderboard.

    - **windowSize**: number of top users to return (must be a positive integer)
    - **sortKey**: ranking key (defaults to totalPoints)
    - **requesterId**: optional; the requester's own entry is returned in
      `pinnedUser` when they rank outside the window
    - **year**, **studentYear**, **search**: optional filters; ranks are
      computed within the filtered population
    """
    try:
        return service.get_leaderboard(
            LeaderboardViewBuilder.parse_window_size(window_size),
            sort_key,
            requester_id,
            filters=filters,
        )
    except LeaderboardError as e:
        raise _to_http_error(e)


@router.get("/stats", response_model=LeaderboardStats)
def get_leaderboard_stats(
    filters: PopulationFilter = Depends(get_population_filter),
    service: LeaderboardService = Depends(get_leaderboard_service)
):
    """
    Get population statistics: total users, top points and average points.
    """
    try:
        return service.get_stats(filters)
    except LeaderboardError as e:
        raise _to_http_error(e)


@router.get("/user/{user_id}", response_model=Optional[RankedEntry])
def get_user_ranking(
    user_id: str,
    sort_key: str = Query(settings.LEADERBOARD_DEFAULT_SORT_KEY, alias="sortKey", description="Ranking key"),
    filters: PopulationFilter = Depends(get_population_filter),
    service: LeaderboardService = Depends(get_leaderboard_service)
):
    """
    Get a specific user's ranking.

    - **user_id**: id of the user to look up
    - Returns null if the user is not ranked
    """
    try:
        return service.get_user_ranking(user_id, sort_key, filters=filters)
    except LeaderboardError as e:
        raise _to_http_error(e)
