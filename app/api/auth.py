"""
Authentication API routes - Google sign-in exchanged for our own JWTs
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session
from google.oauth2 import id_token
from google.auth.transport import requests as google_requests

from app.database import get_db
from app.models.user import User
from app.config import settings
from app.auth.utils import (
    create_access_token, create_refresh_token, verify_token, get_current_user, get_optional_user
)
from app.api.schemas import (
    GoogleAuthRequest, AuthResponse, UserResponse, RefreshRequest, TokenResponse, SessionResponse
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def verify_google_token(token: str) -> dict:
    """Claims of a Google ID token issued for our client id"""
    try:
        return id_token.verify_oauth2_token(token, google_requests.Request(), settings.GOOGLE_CLIENT_ID)
    except ValueError as e:
        logger.warning("Rejected Google token: %s", e)
        raise _unauthorized(f"Invalid Google token: {e}")


def upsert_google_user(db: Session, claims: dict) -> User:
    """
    Find the user for a set of Google claims, creating them on first sign-in.

    Accounts created before Google sign-in existed are matched by email and
    linked to the Google id. Name and avatar follow the Google profile.
    """
    email = claims["email"]
    user = db.query(User).filter(
        or_(User.google_id == claims["sub"], User.email == email)
    ).first()

    if user is None:
        user = User(email=email, google_id=claims["sub"])
        db.add(user)
        logger.info("Registered user %s", email)

    user.google_id = claims["sub"]
    user.name = claims.get("name") or email.split("@")[0]
    user.avatar_url = claims.get("picture")
    db.commit()
    db.refresh(user)
    return user


@router.post("/google", response_model=AuthResponse)
def google_auth(request: GoogleAuthRequest, db: Session = Depends(get_db)):
    """Sign in with a Google ID token; returns our access/refresh tokens"""
    user = upsert_google_user(db, verify_google_token(request.token))
    return AuthResponse(
        access_token=create_access_token(user.id),
        refresh_token=create_refresh_token(user.id),
        user=UserResponse.model_validate(user),
    )


@router.post("/refresh", response_model=TokenResponse)
def refresh_token(request: RefreshRequest, db: Session = Depends(get_db)):
    """Trade a refresh token for a new access token"""
    user_id = verify_token(request.refresh_token, "refresh")
    if user_id is None:
        raise _unauthorized("Invalid or expired refresh token")

    if db.get(User, user_id) is None:
        raise _unauthorized("User not found")

    return TokenResponse(access_token=create_access_token(user_id))


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)


@router.post("/logout")
def logout(current_user: User = Depends(get_current_user)):
    """Tokens are stateless; the client drops them"""
    logger.info("User %s logged out", current_user.id)
    return {"message": "Logged out successfully"}


@router.get("/session", response_model=SessionResponse)
def get_session_state(current_user: Optional[User] = Depends(get_optional_user)):
    """Who is signed in, if anyone. Anonymous visitors get authenticated=false rather than a 401."""
    if current_user is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(authenticated=True, user=UserResponse.model_validate(current_user))
