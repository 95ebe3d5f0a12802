"""
Application configuration
"""
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "")
    return int(value) if value.strip() else None


class Settings:
    """Settings from environment variables"""

    # Database
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "college_cricket.db")

    # JWT settings
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "change-me-in-production")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60  # 1 hour
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7  # 7 days

    # Google OAuth settings
    GOOGLE_CLIENT_ID: str = os.getenv("GOOGLE_CLIENT_ID", os.getenv("OAUTH2_CLIENT_ID", ""))

    # Comma-separated, added to the local dev origins
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Rankings
    DASHBOARD_TOP_LIMIT: int = int(os.getenv("DASHBOARD_TOP_LIMIT", "3"))
    DASHBOARD_MATCH_LIMIT: int = int(os.getenv("DASHBOARD_MATCH_LIMIT", "2"))
    LEADERBOARD_LIMIT: Optional[int] = _optional_int("LEADERBOARD_LIMIT")


settings = Settings()
