"""
Player API endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends

from app.api.dependencies import get_store, require_row, changes
from app.api.schemas import (
    PlayerCreate, PlayerUpdate, PlayerResponse, PlayerDetail, PlayerRoleEnum, TeamResponse
)
from app.auth.utils import get_current_user
from app.engine import ranking
from app.engine.records import PlayerRecord, TeamRecord
from app.models.user import User
from app.store import Store

router = APIRouter(prefix="/players", tags=["Players"])


@router.get("", response_model=List[PlayerResponse])
def list_players(
    search: Optional[str] = None,
    role: Optional[PlayerRoleEnum] = None,
    store: Store = Depends(get_store),
):
    """List players, optionally searching name/college and filtering by role"""
    players = [PlayerRecord.from_row(r) for r in store.select("players")]
    players = ranking.filter_by_text(players, search, ranking.SEARCH_FIELDS)
    players = ranking.filter_by_field(players, "role", role.value if role else None)
    return [PlayerResponse.from_record(p) for p in players]


@router.get("/{player_id}", response_model=PlayerDetail)
def get_player(player_id: str, store: Store = Depends(get_store)):
    """Player profile with per-match averages"""
    player = PlayerRecord.from_row(require_row(store, "players", player_id, "Player"))

    team = None
    if player.team_id:
        team_row = store.select_one("teams", id=player.team_id)
        if team_row:
            team = TeamResponse.from_record(TeamRecord.from_row(team_row))

    return PlayerDetail(
        **PlayerResponse.from_record(player).model_dump(),
        runs_per_match=round(ranking.runs_per_match(player), 2),
        wickets_per_match=round(ranking.wickets_per_match(player), 2),
        team=team,
    )


@router.post("", response_model=PlayerResponse, status_code=201)
def create_player(
    player_data: PlayerCreate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Create a player"""
    row = player_data.model_dump()
    row["role"] = player_data.role.value
    row["created_by"] = current_user.id
    created = store.insert("players", [row])[0]
    return PlayerResponse.from_record(PlayerRecord.from_row(created))


@router.put("/{player_id}", response_model=PlayerResponse)
def update_player(
    player_id: str,
    player_data: PlayerUpdate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Update a player"""
    require_row(store, "players", player_id, "Player")
    updated = store.update("players", changes(player_data), id=player_id)[0]
    return PlayerResponse.from_record(PlayerRecord.from_row(updated))


@router.delete("/{player_id}")
def delete_player(
    player_id: str,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Delete a player"""
    require_row(store, "players", player_id, "Player")
    # teams.captain has no FK to cascade through
    store.update("teams", {"captain": None}, captain=player_id)
    store.delete("players", id=player_id)
    return {"message": "Player deleted"}
