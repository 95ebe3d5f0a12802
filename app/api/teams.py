"""
Team API endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends

from app.api.dependencies import get_store, require_row, changes
from app.api.schemas import TeamCreate, TeamUpdate, TeamResponse, TeamDetail, PlayerResponse
from app.auth.utils import get_current_user
from app.engine import ranking
from app.engine.records import PlayerRecord, TeamRecord
from app.models.user import User
from app.store import Store

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.get("", response_model=List[TeamResponse])
def list_teams(search: Optional[str] = None, store: Store = Depends(get_store)):
    """List teams, optionally searching name and college"""
    teams = [TeamRecord.from_row(r) for r in store.select("teams")]
    teams = ranking.filter_by_text(teams, search, ranking.SEARCH_FIELDS)
    return [TeamResponse.from_record(t) for t in teams]


@router.get("/{team_id}", response_model=TeamDetail)
def get_team(team_id: str, store: Store = Depends(get_store)):
    """Team details with squad and win/loss/draw percentages"""
    team = TeamRecord.from_row(require_row(store, "teams", team_id, "Team"))
    players = [PlayerRecord.from_row(r) for r in store.select("players", team_id=team_id)]

    return TeamDetail(
        **TeamResponse.from_record(team).model_dump(),
        players=[PlayerResponse.from_record(p) for p in players],
        win_percentage=round(ranking.win_percentage(team), 1),
        loss_percentage=round(ranking.loss_percentage(team), 1),
        draw_percentage=round(ranking.draw_percentage(team), 1),
    )


@router.post("", response_model=TeamResponse, status_code=201)
def create_team(
    team_data: TeamCreate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Create a team"""
    row = team_data.model_dump()
    row["created_by"] = current_user.id
    created = store.insert("teams", [row])[0]
    return TeamResponse.from_record(TeamRecord.from_row(created))


@router.put("/{team_id}", response_model=TeamResponse)
def update_team(
    team_id: str,
    team_data: TeamUpdate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Update a team"""
    require_row(store, "teams", team_id, "Team")
    updated = store.update("teams", changes(team_data), id=team_id)[0]
    return TeamResponse.from_record(TeamRecord.from_row(updated))


@router.delete("/{team_id}")
def delete_team(
    team_id: str,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Delete a team (its tournament memberships and matches go with it)"""
    require_row(store, "teams", team_id, "Team")
    store.delete("teams", id=team_id)
    return {"message": "Team deleted"}
