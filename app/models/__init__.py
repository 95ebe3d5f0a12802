from app.models.user import User
from app.models.player import Player, PlayerRole
from app.models.team import Team
from app.models.tournament import Tournament, TournamentTeam, TournamentStatus
from app.models.match import Match, MatchStatus

__all__ = [
    "User",
    "Player",
    "PlayerRole",
    "Team",
    "Tournament",
    "TournamentTeam",
    "TournamentStatus",
    "Match",
    "MatchStatus",
]
