from typing import Optional, List
from sqlalchemy import String, Integer, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import date, datetime
import enum
from app.database import Base, generate_id


class TournamentStatus(enum.Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class Tournament(Base):
    __tablename__ = "tournaments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(200))
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    location: Mapped[str] = mapped_column(String(200))
    status: Mapped[str] = mapped_column(String(20), default=TournamentStatus.UPCOMING.value)
    team_count: Mapped[int] = mapped_column(Integer)  # Target number of teams

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    created_by: Mapped[Optional[str]] = mapped_column(ForeignKey("users.id"), nullable=True)

    # Relationships
    memberships: Mapped[List["TournamentTeam"]] = relationship(
        "TournamentTeam", back_populates="tournament", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Tournament {self.name} ({self.status})>"


class TournamentTeam(Base):
    """Membership of one team in one tournament"""
    __tablename__ = "tournament_teams"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    tournament_id: Mapped[str] = mapped_column(ForeignKey("tournaments.id", ondelete="CASCADE"))
    team_id: Mapped[str] = mapped_column(ForeignKey("teams.id", ondelete="CASCADE"))
    joined_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    created_by: Mapped[Optional[str]] = mapped_column(ForeignKey("users.id"), nullable=True)

    tournament = relationship("Tournament", back_populates="memberships")
    team = relationship("Team")

    __table_args__ = (
        UniqueConstraint('tournament_id', 'team_id', name='unique_tournament_team'),
    )

    def __repr__(self):
        return f"<TournamentTeam tournament={self.tournament_id} team={self.team_id}>"
