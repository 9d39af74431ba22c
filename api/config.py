"""
Configuration settings for the Leaderboard API.
Uses pydantic-settings for type-safe environment variable management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Database
    DATABASE_URL: str = "postgresql://wafa_user:changeme@db:5432/wafa"

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Leaderboard defaults
    LEADERBOARD_DEFAULT_WINDOW: int = 20
    LEADERBOARD_DEFAULT_SORT_KEY: str = "totalPoints"


# Global settings instance
settings = Settings()
