"""
UserStats model - stores the aggregated point tallies per user.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer, Index
from sqlalchemy.orm import relationship
from database import Base, utcnow
import uuid


class UserStats(Base):
    """Per-user gamification counters, written by the point-awarding events."""
    __tablename__ = "user_stats"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    # Points system
    total_points = Column(Integer, nullable=False, default=0, index=True)
    # Blue points come from approved explanations (+40 each)
    blue_points = Column(Integer, nullable=False, default=0)
    # Green points come from approved reports (+30 each)
    green_points = Column(Integer, nullable=False, default=0)

    # Distinct questions answered at least once
    questions_answered = Column(Integer, nullable=False, default=0)

    # Timestamps
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="stats")

    __table_args__ = (
        # Leaderboard query optimization (order by points)
        Index('idx_user_stats_points', 'total_points', 'user_id'),
    )

    def __repr__(self):
        return f"<UserStats(user_id={self.user_id}, total_points={self.total_points})>"
