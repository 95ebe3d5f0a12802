"""
Authentication module for Google OAuth and JWT tokens
"""
from app.auth.utils import get_current_user, get_optional_user, create_access_token, create_refresh_token
from app.config import settings

__all__ = [
    "get_current_user",
    "get_optional_user",
    "create_access_token",
    "create_refresh_token",
    "settings",
]
