"""
Match API endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_store, require_row, changes
from app.api.schemas import MatchCreate, MatchUpdate, MatchResponse, MatchStatusEnum
from app.auth.utils import get_current_user
from app.engine import ranking
from app.engine.records import MatchRecord
from app.models.user import User
from app.store import Store
from app.validators.match_validator import MatchValidator

router = APIRouter(prefix="/matches", tags=["Matches"])


def _validate(store: Store, team1_id: str, team2_id: str, result: Optional[dict]):
    known = {r["id"] for r in store.select("teams", id=[team1_id, team2_id])}
    validation = MatchValidator.validate(team1_id, team2_id, known, result)
    if not validation["valid"]:
        raise HTTPException(status_code=400, detail="; ".join(validation["errors"]))


@router.get("", response_model=List[MatchResponse])
def list_matches(
    search: Optional[str] = None,
    status: Optional[MatchStatusEnum] = None,
    store: Store = Depends(get_store),
):
    """List matches, optionally searching venue and filtering by status"""
    matches = [MatchRecord.from_row(r) for r in store.select("matches")]
    matches = ranking.filter_by_text(matches, search, ("venue",))
    matches = ranking.filter_by_field(matches, "status", status.value if status else None)
    return [MatchResponse.from_record(m) for m in matches]


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(match_id: str, store: Store = Depends(get_store)):
    """Get match details"""
    return MatchResponse.from_record(MatchRecord.from_row(require_row(store, "matches", match_id, "Match")))


@router.post("", response_model=MatchResponse, status_code=201)
def create_match(
    match_data: MatchCreate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Schedule a match"""
    row = match_data.model_dump()
    _validate(store, row["team1_id"], row["team2_id"], row["result"])

    row["status"] = match_data.status.value
    row["created_by"] = current_user.id
    created = store.insert("matches", [row])[0]
    return MatchResponse.from_record(MatchRecord.from_row(created))


@router.put("/{match_id}", response_model=MatchResponse)
def update_match(
    match_id: str,
    match_data: MatchUpdate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Update a match, e.g. to record its result"""
    current = require_row(store, "matches", match_id, "Match")
    values = changes(match_data)
    _validate(
        store,
        values.get("team1_id", current["team1_id"]),
        values.get("team2_id", current["team2_id"]),
        values.get("result", current["result"]),
    )
    updated = store.update("matches", values, id=match_id)[0]
    return MatchResponse.from_record(MatchRecord.from_row(updated))


@router.delete("/{match_id}")
def delete_match(
    match_id: str,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Delete a match"""
    require_row(store, "matches", match_id, "Match")
    store.delete("matches", id=match_id)
    return {"message": "Match deleted"}
