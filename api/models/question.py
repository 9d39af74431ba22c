"""
Question model - only counted by the leaderboard for progress percentages.
"""
from sqlalchemy import Column, String, DateTime, Text
from database import Base, utcnow
import uuid


class Question(Base):
    """Exam question; managed by the content admin, counted here."""
    __tablename__ = "questions"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    text = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Question(id={self.id})>"
