"""
Pytest configuration and fixtures for the Leaderboard API tests.

- Unit tests rank an in-memory population through InMemoryScoreStore
- Integration tests call the HTTP routes against an in-memory SQLite
  database wired in through the get_db dependency
"""
import os

# Must be set before config/database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "DEBUG"

from typing import Generator, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from models import Question, User, UserSemester, UserStats
from schemas import PopulationFilter, ScoreRecord
from services.exceptions import StoreUnavailableError
from services.score_store import ScoreRecordStore


# ============================================================================
# IN-MEMORY STORES
# ============================================================================


class InMemoryScoreStore(ScoreRecordStore):
    """Score store holding a fixed population; counts how often it was read."""

    def __init__(self, records: Optional[List[ScoreRecord]] = None, total_questions: int = 0):
        self.records = list(records or [])
        self.total_questions = total_questions
        self.reads = 0
        self.last_filters = None

    def list_all(self, filters: Optional[PopulationFilter] = None) -> Tuple[List[ScoreRecord], int]:
        self.reads += 1
        self.last_filters = filters
        return list(self.records), self.total_questions


class UnavailableScoreStore(ScoreRecordStore):
    """Score store that always fails to read."""

    def __init__(self):
        self.reads = 0

    def list_all(self, filters=None):
        self.reads += 1
        raise StoreUnavailableError("Score store is unavailable")


def make_record(user_id: str, total_points: int = 0, **fields) -> ScoreRecord:
    """Build a ScoreRecord with sensible defaults."""
    fields.setdefault("name", f"User {user_id}")
    return ScoreRecord(user_id=user_id, total_points=total_points, **fields)


@pytest.fixture
def record_factory():
    """Factory for ScoreRecord test data."""
    return make_record


@pytest.fixture
def memory_store() -> InMemoryScoreStore:
    """Empty in-memory score store; tests fill it as needed."""
    return InMemoryScoreStore()


@pytest.fixture
def ladder_records() -> List[ScoreRecord]:
    """
    Thirty users with distinct totals: u01 has 3000 points, u30 has 100.

    The user number is also the rank by total points.
    """
    return [
        make_record(f"u{i:02d}", total_points=(31 - i) * 100, answered_count=i)
        for i in range(1, 31)
    ]


# ============================================================================
# DATABASE FIXTURES (Integration Tests)
# ============================================================================


@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite engine with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Generator[Session, None, None]:
    """Database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed_user(db_session):
    """Insert a user (and optionally its stats row) into the test database."""

    def _seed(
        user_id: str,
        name: str = "",
        total_points: Optional[int] = 0,
        blue_points: int = 0,
        green_points: int = 0,
        questions_answered: int = 0,
        is_active: bool = True,
        username: str = "",
        student_year: Optional[str] = None,
        semesters: Tuple[str, ...] = (),
    ) -> User:
        user = User(
            id=user_id,
            username=username or user_id,
            name=name or f"User {user_id}",
            email=f"{user_id}@example.com",
            is_active=is_active,
            current_year=student_year,
        )
        db_session.add(user)
        for semester in semesters:
            db_session.add(UserSemester(user_id=user_id, semester=semester))
        if total_points is not None:
            db_session.add(UserStats(
                user_id=user_id,
                total_points=total_points,
                blue_points=blue_points,
                green_points=green_points,
                questions_answered=questions_answered,
            ))
        db_session.commit()
        return user

    return _seed


@pytest.fixture
def seed_questions(db_session):
    """Insert a number of questions into the test database."""

    def _seed(count: int):
        for i in range(count):
            db_session.add(Question(text=f"Question {i + 1}"))
        db_session.commit()

    return _seed


@pytest.fixture
def client(db_engine) -> Generator[TestClient, None, None]:
    """HTTP client whose requests use the test database."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
