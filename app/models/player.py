from datetime import datetime
from typing import Optional
from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
import enum
from app.database import Base, generate_id


class PlayerRole(enum.Enum):
    BATSMAN = "batsman"
    BOWLER = "bowler"
    ALL_ROUNDER = "all-rounder"


class Player(Base):
    __tablename__ = "players"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(100))
    college: Mapped[str] = mapped_column(String(200))
    age: Mapped[int] = mapped_column(Integer)

    # Stored as text; unknown values are defaulted when rows are mapped to records
    role: Mapped[str] = mapped_column(String(20), default=PlayerRole.BATSMAN.value)
    batting_style: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    bowling_style: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Career stats
    matches: Mapped[int] = mapped_column(Integer, default=0)
    runs: Mapped[int] = mapped_column(Integer, default=0)
    wickets: Mapped[int] = mapped_column(Integer, default=0)
    highest_score: Mapped[int] = mapped_column(Integer, default=0)
    best_bowling: Mapped[str] = mapped_column(String(10), default="-")  # e.g. "5/21"
    last_performance_date: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)

    # Team relationship
    team_id: Mapped[Optional[str]] = mapped_column(ForeignKey("teams.id", ondelete="SET NULL"), nullable=True)
    team: Mapped[Optional["Team"]] = relationship("Team", back_populates="players")

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    created_by: Mapped[Optional[str]] = mapped_column(ForeignKey("users.id"), nullable=True)

    def __repr__(self):
        return f"<Player {self.name} ({self.role})>"
