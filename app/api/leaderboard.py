"""
Leaderboard and dashboard endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends

from app.api.dependencies import get_store
from app.api.schemas import LeaderboardResponse, DashboardResponse, PlayerResponse, MatchResponse
from app.config import settings
from app.engine import ranking
from app.engine.ranking import Metric
from app.engine.records import MatchRecord, PlayerRecord, TeamRecord
from app.store import Store

router = APIRouter(tags=["Leaderboard"])


@router.get("/leaderboard", response_model=LeaderboardResponse)
def get_leaderboard(search: Optional[str] = None, store: Store = Depends(get_store)):
    """Top batsmen (runs), bowlers (wickets) and teams (win ratio)"""
    players = [PlayerRecord.from_row(r) for r in store.select("players")]
    teams = [TeamRecord.from_row(r) for r in store.select("teams")]

    board = ranking.build_leaderboard(players, teams, search=search, limit=settings.LEADERBOARD_LIMIT)
    return LeaderboardResponse.from_leaderboard(board)


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(store: Store = Depends(get_store)):
    """Counts, top performers and upcoming/recent matches"""
    players = [PlayerRecord.from_row(r) for r in store.select("players")]
    teams = store.select("teams")
    matches = [MatchRecord.from_row(r) for r in store.select("matches")]

    upcoming = ranking.upcoming_matches(matches)
    limit = settings.DASHBOARD_TOP_LIMIT
    shown = settings.DASHBOARD_MATCH_LIMIT

    return DashboardResponse(
        total_players=len(players),
        total_teams=len(teams),
        total_matches=len(matches),
        upcoming_count=len(upcoming),
        top_batsmen=[PlayerResponse.from_record(p) for p in ranking.top_by_metric(players, Metric.RUNS, limit)],
        top_bowlers=[PlayerResponse.from_record(p) for p in ranking.top_by_metric(players, Metric.WICKETS, limit)],
        upcoming_matches=[MatchResponse.from_record(m) for m in upcoming[:shown]],
        recent_matches=[MatchResponse.from_record(m) for m in ranking.recent_matches(matches)[:shown]],
    )
