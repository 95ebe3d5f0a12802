from typing import Optional
from sqlalchemy import String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
import enum
from app.database import Base, generate_id


class MatchStatus(enum.Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"


class Match(Base):
    __tablename__ = "matches"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)

    # Teams
    team1_id: Mapped[str] = mapped_column(ForeignKey("teams.id", ondelete="CASCADE"))
    team2_id: Mapped[str] = mapped_column(ForeignKey("teams.id", ondelete="CASCADE"))
    team1: Mapped["Team"] = relationship("Team", foreign_keys=[team1_id])
    team2: Mapped["Team"] = relationship("Team", foreign_keys=[team2_id])

    # Match info
    date: Mapped[datetime] = mapped_column(DateTime)
    venue: Mapped[str] = mapped_column(String(200))
    status: Mapped[str] = mapped_column(String(20), default=MatchStatus.UPCOMING.value)
    tournament_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("tournaments.id", ondelete="SET NULL"), nullable=True
    )

    # {"winner", "team1_score", "team2_score", "player_of_match"}
    result: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    created_by: Mapped[Optional[str]] = mapped_column(ForeignKey("users.id"), nullable=True)

    def __repr__(self):
        return f"<Match {self.team1_id} vs {self.team2_id} @ {self.venue}>"
