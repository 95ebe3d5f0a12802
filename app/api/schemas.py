"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from enum import Enum

from app.engine.records import MatchRecord, PlayerRecord, TeamRecord, TournamentRecord
from app.engine import ranking


# Enums
class PlayerRoleEnum(str, Enum):
    BATSMAN = "batsman"
    BOWLER = "bowler"
    ALL_ROUNDER = "all-rounder"


class TournamentStatusEnum(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class MatchStatusEnum(str, Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"


# Auth Schemas
class GoogleAuthRequest(BaseModel):
    token: str  # Google ID token from frontend


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserResponse


class RefreshRequest(BaseModel):
    refresh_token: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class SessionResponse(BaseModel):
    authenticated: bool
    user: Optional[UserResponse] = None


# Team Schemas
class TeamStatsResponse(BaseModel):
    matches: int
    won: int
    lost: int
    draw: int


class TeamBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    college: str = Field(min_length=1, max_length=200)
    logo_url: Optional[str] = None
    captain: Optional[str] = None  # Player id


class TeamCreate(TeamBase):
    matches_played: int = Field(default=0, ge=0)
    won: int = Field(default=0, ge=0)
    lost: int = Field(default=0, ge=0)
    drawn: int = Field(default=0, ge=0)


class TeamUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    college: Optional[str] = Field(default=None, min_length=1, max_length=200)
    logo_url: Optional[str] = None
    captain: Optional[str] = None
    matches_played: Optional[int] = Field(default=None, ge=0)
    won: Optional[int] = Field(default=None, ge=0)
    lost: Optional[int] = Field(default=None, ge=0)
    drawn: Optional[int] = Field(default=None, ge=0)


class TeamResponse(TeamBase):
    id: str
    stats: TeamStatsResponse

    @classmethod
    def from_record(cls, team: TeamRecord) -> "TeamResponse":
        return cls(
            id=team.id,
            name=team.name,
            college=team.college,
            logo_url=team.logo_url,
            captain=team.captain,
            stats=TeamStatsResponse(
                matches=team.stats.matches,
                won=team.stats.won,
                lost=team.stats.lost,
                draw=team.stats.draw,
            ),
        )


# Player Schemas
class PlayerStatsResponse(BaseModel):
    matches: int
    runs: int
    wickets: int
    highest_score: int
    best_bowling: str


class PlayerBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    college: str = Field(min_length=1, max_length=200)
    age: int = Field(ge=10, le=80)
    role: PlayerRoleEnum
    team_id: Optional[str] = None
    image_url: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None


class PlayerCreate(PlayerBase):
    matches: int = Field(default=0, ge=0)
    runs: int = Field(default=0, ge=0)
    wickets: int = Field(default=0, ge=0)
    highest_score: int = Field(default=0, ge=0)
    best_bowling: str = "-"


class PlayerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    college: Optional[str] = Field(default=None, min_length=1, max_length=200)
    age: Optional[int] = Field(default=None, ge=10, le=80)
    role: Optional[PlayerRoleEnum] = None
    team_id: Optional[str] = None
    image_url: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    matches: Optional[int] = Field(default=None, ge=0)
    runs: Optional[int] = Field(default=None, ge=0)
    wickets: Optional[int] = Field(default=None, ge=0)
    highest_score: Optional[int] = Field(default=None, ge=0)
    best_bowling: Optional[str] = None


class PlayerResponse(BaseModel):
    id: str
    name: str
    college: str
    age: int
    role: str
    team_id: Optional[str] = None
    image_url: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    stats: PlayerStatsResponse

    @classmethod
    def from_record(cls, player: PlayerRecord) -> "PlayerResponse":
        return cls(
            id=player.id,
            name=player.name,
            college=player.college,
            age=player.age,
            role=player.role.value,
            team_id=player.team_id,
            image_url=player.image_url,
            batting_style=player.batting_style,
            bowling_style=player.bowling_style,
            stats=PlayerStatsResponse(
                matches=player.stats.matches,
                runs=player.stats.runs,
                wickets=player.stats.wickets,
                highest_score=player.stats.highest_score,
                best_bowling=player.stats.best_bowling,
            ),
        )


class PlayerDetail(PlayerResponse):
    runs_per_match: float
    wickets_per_match: float
    team: Optional[TeamResponse] = None


class TeamDetail(TeamResponse):
    players: list[PlayerResponse]
    win_percentage: float
    loss_percentage: float
    draw_percentage: float


# Tournament Schemas
class TournamentBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    start_date: date
    end_date: date
    location: str = Field(min_length=1, max_length=200)
    status: TournamentStatusEnum = TournamentStatusEnum.UPCOMING
    team_count: int


class TournamentCreate(TournamentBase):
    pass


class TournamentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    location: Optional[str] = Field(default=None, min_length=1, max_length=200)
    status: Optional[TournamentStatusEnum] = None
    team_count: Optional[int] = None


class TournamentResponse(BaseModel):
    id: str
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    location: str
    status: str
    team_count: int

    @classmethod
    def from_record(cls, tournament: TournamentRecord) -> "TournamentResponse":
        return cls(
            id=tournament.id,
            name=tournament.name,
            start_date=tournament.start_date,
            end_date=tournament.end_date,
            location=tournament.location,
            status=tournament.status.value,
            team_count=tournament.team_count,
        )


# Roster Schemas
class RosterResponse(BaseModel):
    tournament_id: str
    teams: list[TeamResponse]
    count: int
    capacity: int
    is_empty: bool


class AddTeamsRequest(BaseModel):
    team_ids: list[str]


class RosterMutationResponse(BaseModel):
    success: bool
    message: str
    team_ids: list[str]
    already_removed: bool = False
    roster: Optional[RosterResponse] = None


# Match Schemas
class MatchResultSchema(BaseModel):
    winner: Optional[str] = None  # Team id
    team1_score: str = ""  # e.g. "165/6 (20)"
    team2_score: str = ""
    player_of_match: Optional[str] = None  # Player id


class MatchCreate(BaseModel):
    team1_id: str
    team2_id: str
    date: datetime
    venue: str = Field(min_length=1, max_length=200)
    status: MatchStatusEnum = MatchStatusEnum.UPCOMING
    tournament_id: Optional[str] = None
    result: Optional[MatchResultSchema] = None


class MatchUpdate(BaseModel):
    team1_id: Optional[str] = None
    team2_id: Optional[str] = None
    date: Optional[datetime] = None
    venue: Optional[str] = Field(default=None, min_length=1, max_length=200)
    status: Optional[MatchStatusEnum] = None
    tournament_id: Optional[str] = None
    result: Optional[MatchResultSchema] = None


class MatchResponse(BaseModel):
    id: str
    team1_id: str
    team2_id: str
    date: Optional[datetime] = None
    venue: str
    status: str
    tournament_id: Optional[str] = None
    result: Optional[MatchResultSchema] = None

    @classmethod
    def from_record(cls, match: MatchRecord) -> "MatchResponse":
        return cls(
            id=match.id,
            team1_id=match.team1_id,
            team2_id=match.team2_id,
            date=match.date,
            venue=match.venue,
            status=match.status.value,
            tournament_id=match.tournament_id,
            result=MatchResultSchema(**match.result.to_dict()) if match.result else None,
        )


# Leaderboard Schemas
class BatterLeaderboardEntry(BaseModel):
    rank: int
    player_id: str
    name: str
    college: str
    image_url: Optional[str] = None
    matches: int
    runs: int
    runs_per_match: float


class BowlerLeaderboardEntry(BaseModel):
    rank: int
    player_id: str
    name: str
    college: str
    image_url: Optional[str] = None
    matches: int
    wickets: int
    wickets_per_match: float


class TeamLeaderboardEntry(BaseModel):
    rank: int
    team_id: str
    name: str
    college: str
    matches: int
    won: int
    win_percentage: float


class LeaderboardResponse(BaseModel):
    top_batsmen: list[BatterLeaderboardEntry]
    top_bowlers: list[BowlerLeaderboardEntry]
    top_teams: list[TeamLeaderboardEntry]

    @classmethod
    def from_leaderboard(cls, board: ranking.Leaderboard) -> "LeaderboardResponse":
        return cls(
            top_batsmen=[
                BatterLeaderboardEntry(
                    rank=e.rank,
                    player_id=e.item.id,
                    name=e.item.name,
                    college=e.item.college,
                    image_url=e.item.image_url,
                    matches=e.item.stats.matches,
                    runs=e.item.stats.runs,
                    runs_per_match=round(e.value, 2),
                )
                for e in board.top_batsmen
            ],
            top_bowlers=[
                BowlerLeaderboardEntry(
                    rank=e.rank,
                    player_id=e.item.id,
                    name=e.item.name,
                    college=e.item.college,
                    image_url=e.item.image_url,
                    matches=e.item.stats.matches,
                    wickets=e.item.stats.wickets,
                    wickets_per_match=round(e.value, 2),
                )
                for e in board.top_bowlers
            ],
            top_teams=[
                TeamLeaderboardEntry(
                    rank=e.rank,
                    team_id=e.item.id,
                    name=e.item.name,
                    college=e.item.college,
                    matches=e.item.stats.matches,
                    won=e.item.stats.won,
                    win_percentage=round(e.value, 1),
                )
                for e in board.top_teams
            ],
        )


class DashboardResponse(BaseModel):
    total_players: int
    total_teams: int
    total_matches: int
    upcoming_count: int
    top_batsmen: list[PlayerResponse]
    top_bowlers: list[PlayerResponse]
    upcoming_matches: list[MatchResponse]
    recent_matches: list[MatchResponse]
