"""
Typed records for rows read from the store.

Rows arrive as loosely-typed dicts. They are mapped here once, at the
boundary, so ranking and roster code only ever sees these dataclasses.
Unrecognized status and role strings are defaulted (and logged) rather than
passed through.
"""
import enum
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Type, TypeVar, Union

from app.models.match import MatchStatus
from app.models.player import PlayerRole
from app.models.tournament import TournamentStatus

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)


def coerce_enum(value, enum_cls: Type[E], default: E, context: str = "") -> E:
    """Map a raw string to enum_cls, falling back to default for anything unrecognized."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace("_", "-")
        for member in enum_cls:
            if member.value.replace("_", "-") == normalized:
                return member
    logger.warning(
        "Unrecognized %s %r%s, defaulting to %r",
        enum_cls.__name__, value, f" ({context})" if context else "", default.value,
    )
    return default


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value)


@dataclass
class TeamStats:
    matches: int = 0
    won: int = 0
    lost: int = 0
    draw: int = 0


@dataclass
class TeamRecord:
    id: str
    name: str
    college: str
    logo_url: Optional[str] = None
    captain: Optional[str] = None
    stats: TeamStats = field(default_factory=TeamStats)

    @classmethod
    def from_row(cls, row: dict) -> "TeamRecord":
        return cls(
            id=row["id"],
            name=row["name"],
            college=row.get("college") or "",
            logo_url=row.get("logo_url"),
            captain=row.get("captain"),
            stats=TeamStats(
                matches=row.get("matches_played") or 0,
                won=row.get("won") or 0,
                lost=row.get("lost") or 0,
                draw=row.get("drawn") or 0,
            ),
        )


@dataclass
class PlayerStats:
    matches: int = 0
    runs: int = 0
    wickets: int = 0
    highest_score: int = 0
    best_bowling: str = "-"


@dataclass
class PlayerRecord:
    id: str
    name: str
    college: str
    age: int
    role: PlayerRole = PlayerRole.BATSMAN
    team_id: Optional[str] = None
    image_url: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    stats: PlayerStats = field(default_factory=PlayerStats)

    @classmethod
    def from_row(cls, row: dict) -> "PlayerRecord":
        return cls(
            id=row["id"],
            name=row["name"],
            college=row.get("college") or "",
            age=row.get("age") or 0,
            role=coerce_enum(row.get("role"), PlayerRole, PlayerRole.BATSMAN, f"player {row['id']}"),
            team_id=row.get("team_id"),
            image_url=row.get("image_url"),
            batting_style=row.get("batting_style"),
            bowling_style=row.get("bowling_style"),
            stats=PlayerStats(
                matches=row.get("matches") or 0,
                runs=row.get("runs") or 0,
                wickets=row.get("wickets") or 0,
                highest_score=row.get("highest_score") or 0,
                best_bowling=row.get("best_bowling") or "-",
            ),
        )


@dataclass
class TournamentRecord:
    id: str
    name: str
    start_date: Optional[date]
    end_date: Optional[date]
    location: str
    status: TournamentStatus
    team_count: int

    @classmethod
    def from_row(cls, row: dict) -> "TournamentRecord":
        return cls(
            id=row["id"],
            name=row["name"],
            start_date=parse_date(row.get("start_date")),
            end_date=parse_date(row.get("end_date")),
            location=row.get("location") or "",
            status=coerce_enum(
                row.get("status"), TournamentStatus, TournamentStatus.UPCOMING, f"tournament {row['id']}"
            ),
            team_count=row.get("team_count") or 0,
        )


@dataclass
class MembershipRecord:
    tournament_id: str
    team_id: str
    id: Optional[str] = None
    joined_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict) -> "MembershipRecord":
        return cls(
            id=row.get("id"),
            tournament_id=row["tournament_id"],
            team_id=row["team_id"],
            joined_at=parse_datetime(row.get("joined_at")),
        )


@dataclass
class MatchResult:
    winner: Optional[str] = None
    team1_score: str = ""
    team2_score: str = ""
    player_of_match: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> Optional["MatchResult"]:
        if not d:
            return None
        return cls(
            winner=d.get("winner"),
            team1_score=d.get("team1_score", d.get("team1Score", "")),
            team2_score=d.get("team2_score", d.get("team2Score", "")),
            player_of_match=d.get("player_of_match", d.get("playerOfMatch")),
        )

    def to_dict(self) -> dict:
        return {
            "winner": self.winner,
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
            "player_of_match": self.player_of_match,
        }


@dataclass
class MatchRecord:
    id: str
    team1_id: str
    team2_id: str
    date: Optional[datetime]
    venue: str
    status: MatchStatus
    tournament_id: Optional[str] = None
    result: Optional[MatchResult] = None

    @classmethod
    def from_row(cls, row: dict) -> "MatchRecord":
        return cls(
            id=row["id"],
            team1_id=row["team1_id"],
            team2_id=row["team2_id"],
            date=parse_datetime(row.get("date")),
            venue=row.get("venue") or "",
            status=coerce_enum(row.get("status"), MatchStatus, MatchStatus.UPCOMING, f"match {row['id']}"),
            tournament_id=row.get("tournament_id"),
            result=MatchResult.from_dict(row.get("result")),
        )
