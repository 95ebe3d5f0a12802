"""
Shared fixtures - an in-memory database and a store over it.
"""
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

import app.models  # noqa - registers every table on Base.metadata
from app.database import Base
from app.models.user import User
from app.store import Store


@pytest.fixture
def test_db():
    """Create an in-memory test database shared across threads (TestClient runs in one)."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = Session(engine)
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def store(test_db):
    return Store(test_db)


@pytest.fixture
def user(test_db):
    user = User(email="captain@college.edu", google_id="google-123", name="Test Captain")
    test_db.add(user)
    test_db.commit()
    return user


@pytest.fixture
def make_team(store):
    """Insert a team and return its row"""
    def _make(name: str, college: str = None, matches: int = 0, won: int = 0, **extra) -> dict:
        row = {
            "name": name,
            "college": college or f"{name} College",
            "matches_played": matches,
            "won": won,
        }
        row.update(extra)
        return store.insert("teams", [row])[0]
    return _make


@pytest.fixture
def catalog(make_team):
    """Six teams A-F, keyed by name"""
    return {name: make_team(name) for name in "ABCDEF"}


@pytest.fixture
def tournament(store):
    return store.insert("tournaments", [{
        "name": "Inter-College Cup",
        "start_date": date(2024, 3, 10),
        "end_date": date(2024, 4, 25),
        "location": "Mumbai University Ground",
        "status": "ongoing",
        "team_count": 8,
    }])[0]
