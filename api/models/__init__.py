"""
SQLAlchemy database models.
"""
from .user import User, UserSemester
from .user_stats import UserStats
from .question import Question

__all__ = ["User", "UserSemester", "UserStats", "Question"]
