"""
Read access to the per-user score records the leaderboard ranks.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import and_, exists, func, or_
import logging

from models import User, UserSemester, UserStats, Question
from schemas import PopulationFilter, ScoreRecord
from services.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class ScoreRecordStore(ABC):
    """Source of score records. The leaderboard reads it and never writes to it."""

    @abstractmethod
    def list_all(self, filters: Optional[PopulationFilter] = None) -> Tuple[List[ScoreRecord], int]:
        """
        Read every score record and the number of questions in the system.

        Args:
            filters: Optional population restriction; only matching users
                are returned. The question count is never filtered.

        Returns:
            Tuple of (records, total_questions)

        Raises:
            StoreUnavailableError: If the store cannot be read
        """


class SqlScoreRecordStore(ScoreRecordStore):
    """Score store backed by the users, user_semesters, user_stats and questions tables."""

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def to_record(user: User, stats: UserStats) -> ScoreRecord:
        """Normalize a user row and its (possibly missing) stats row."""
        if stats is None:
            return ScoreRecord(user_id=str(user.id), name=user.name or "")

        return ScoreRecord(
            user_id=str(user.id),
            name=user.name or "",
            total_points=stats.total_points or 0,
            blue_points=stats.blue_points or 0,
            green_points=stats.green_points or 0,
            answered_count=stats.questions_answered or 0,
        )

    @staticmethod
    def apply_filters(query, filters: Optional[PopulationFilter]):
        """Restrict a users query to the requested semester, study year and search term."""
        if filters is None or filters.is_empty:
            return query

        if filters.semester is not None:
            query = query.filter(
                exists().where(and_(
                    UserSemester.user_id == User.id,
                    UserSemester.semester == filters.semester,
                ))
            )

        if filters.student_year is not None:
            query = query.filter(User.current_year == filters.student_year)

        if filters.search is not None:
            term = filters.search.lower()
            query = query.filter(or_(
                func.lower(User.name).contains(term, autoescape=True),
                func.lower(User.username).contains(term, autoescape=True),
            ))

        return query

    def list_all(self, filters: Optional[PopulationFilter] = None) -> Tuple[List[ScoreRecord], int]:
        """
        Read active users' score records and the question count.

        Both statements run in the session's current transaction. Under
        read-committed isolation each statement sees its own snapshot, so the
        question count may be slightly newer than the answer counts; the
        percentage clamp in RankingService absorbs that skew.
        """
        try:
            query = self.db.query(User, UserStats).outerjoin(
                UserStats, UserStats.user_id == User.id
            ).filter(
                User.is_active.is_(True)
            )
            rows = self.apply_filters(query, filters).all()

            total_questions = self.db.query(func.count(Question.id)).scalar() or 0

        except SQLAlchemyError as e:
            logger.error(f"Failed to read score records: {e}")
            raise StoreUnavailableError("Score store is unavailable") from e

        records = [self.to_record(user, stats) for user, stats in rows]

        logger.info(f"Loaded {len(records)} score records, {total_questions} questions in system")

        return records, total_questions
