"""
User model - the learner accounts ranked on the leaderboard.
"""
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from database import Base, utcnow
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """User model (read-only from the leaderboard's point of view)."""
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=_new_id)
    username = Column(String(100), nullable=False, default="")
    name = Column(String(255), nullable=False, default="")
    email = Column(String(255), unique=True, nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    # Study year of the student, e.g. '1st', '2nd'
    current_year = Column(String(20), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    stats = relationship("UserStats", back_populates="user", uselist=False, cascade="all, delete-orphan")
    semesters = relationship("UserSemester", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"


class UserSemester(Base):
    """Semester a user is enrolled in (e.g. 'S1', '2025')."""
    __tablename__ = "user_semesters"

    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    semester = Column(String(50), primary_key=True)

    # Relationships
    user = relationship("User", back_populates="semesters")

    __table_args__ = (
        Index('idx_user_semesters_semester', 'semester'),
    )

    def __repr__(self):
        return f"<UserSemester(user_id={self.user_id}, semester={self.semester})>"
