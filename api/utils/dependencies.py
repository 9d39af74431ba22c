"""
FastAPI dependency functions.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from services.score_store import ScoreRecordStore, SqlScoreRecordStore
from services.leaderboard_service import LeaderboardService


def get_score_store(db: Session = Depends(get_db)) -> ScoreRecordStore:
    """Dependency returning the database-backed score store for this request."""
    return SqlScoreRecordStore(db)


def get_leaderboard_service(
    store: ScoreRecordStore = Depends(get_score_store)
) -> LeaderboardService:
    """
    Dependency returning a LeaderboardService bound to the request's store.

    Tests override get_score_store to rank an in-memory population.
    """
    return LeaderboardService(store)
