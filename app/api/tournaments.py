"""
Tournament API endpoints - tournaments and their team rosters
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_store, require_row, changes
from app.api.schemas import (
    TournamentCreate, TournamentUpdate, TournamentResponse, TournamentStatusEnum,
    RosterResponse, AddTeamsRequest, RosterMutationResponse, TeamResponse,
)
from app.auth.utils import get_current_user
from app.engine import ranking
from app.engine.records import TournamentRecord
from app.engine.roster import RosterReconciler, RosterError, RosterOutcome
from app.models.user import User
from app.store import Store
from app.validators.tournament_validator import TournamentValidator

router = APIRouter(prefix="/tournaments", tags=["Tournaments"])
logger = logging.getLogger(__name__)

# How each fatal roster error reaches the client
ROSTER_ERROR_STATUS = {
    RosterError.VALIDATION_ERROR: 400,
    RosterError.DUPLICATE_MEMBERSHIP: 409,
    RosterError.STORE_UNAVAILABLE: 503,
}


def _get_tournament(store: Store, tournament_id: str) -> TournamentRecord:
    return TournamentRecord.from_row(require_row(store, "tournaments", tournament_id, "Tournament"))


def _roster_response(reconciler: RosterReconciler, tournament: TournamentRecord) -> RosterResponse:
    query = reconciler.roster(tournament.id)
    if not query.ok:
        raise HTTPException(status_code=ROSTER_ERROR_STATUS[query.error], detail=query.message)
    return RosterResponse(
        tournament_id=tournament.id,
        teams=[TeamResponse.from_record(t) for t in query.teams],
        count=len(query.teams),
        capacity=tournament.team_count,
        is_empty=not query.teams,
    )


def _mutation_response(
    outcome: RosterOutcome,
    reconciler: RosterReconciler,
    tournament: TournamentRecord,
) -> RosterMutationResponse:
    if outcome.error is not None and outcome.error.is_fatal:
        raise HTTPException(status_code=ROSTER_ERROR_STATUS[outcome.error], detail=outcome.message)

    return RosterMutationResponse(
        success=outcome.ok,
        message=outcome.message,
        team_ids=outcome.team_ids,
        already_removed=outcome.error is RosterError.MEMBERSHIP_NOT_FOUND,
        roster=_roster_response(reconciler, tournament),
    )


def _validate(start_date, end_date, team_count):
    validation = TournamentValidator.validate(start_date, end_date, team_count)
    if not validation["valid"]:
        raise HTTPException(status_code=400, detail="; ".join(validation["errors"]))


@router.get("", response_model=List[TournamentResponse])
def list_tournaments(
    search: Optional[str] = None,
    status: Optional[TournamentStatusEnum] = None,
    store: Store = Depends(get_store),
):
    """List tournaments, optionally searching name/location and filtering by status"""
    tournaments = [TournamentRecord.from_row(r) for r in store.select("tournaments")]
    tournaments = ranking.filter_by_text(tournaments, search, ("name", "location"))
    tournaments = ranking.filter_by_field(tournaments, "status", status.value if status else None)
    return [TournamentResponse.from_record(t) for t in tournaments]


@router.get("/{tournament_id}", response_model=TournamentResponse)
def get_tournament(tournament_id: str, store: Store = Depends(get_store)):
    """Get tournament details"""
    return TournamentResponse.from_record(_get_tournament(store, tournament_id))


@router.post("", response_model=TournamentResponse, status_code=201)
def create_tournament(
    tournament_data: TournamentCreate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Create a tournament"""
    _validate(tournament_data.start_date, tournament_data.end_date, tournament_data.team_count)

    row = tournament_data.model_dump()
    row["status"] = tournament_data.status.value
    row["created_by"] = current_user.id
    created = store.insert("tournaments", [row])[0]
    logger.info("Tournament %s created by %s", created["id"], current_user.id)
    return TournamentResponse.from_record(TournamentRecord.from_row(created))


@router.put("/{tournament_id}", response_model=TournamentResponse)
def update_tournament(
    tournament_id: str,
    tournament_data: TournamentUpdate,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Update a tournament"""
    current = _get_tournament(store, tournament_id)
    values = changes(tournament_data)
    _validate(
        values.get("start_date", current.start_date),
        values.get("end_date", current.end_date),
        values.get("team_count", current.team_count),
    )
    updated = store.update("tournaments", values, id=tournament_id)[0]
    return TournamentResponse.from_record(TournamentRecord.from_row(updated))


@router.delete("/{tournament_id}")
def delete_tournament(
    tournament_id: str,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Delete a tournament and its memberships"""
    _get_tournament(store, tournament_id)
    store.delete("tournaments", id=tournament_id)
    return {"message": "Tournament deleted"}


@router.get("/{tournament_id}/teams", response_model=RosterResponse)
def get_roster(tournament_id: str, store: Store = Depends(get_store)):
    """Teams in the tournament, e.g. 4 of 8"""
    tournament = _get_tournament(store, tournament_id)
    return _roster_response(RosterReconciler(store), tournament)


@router.get("/{tournament_id}/available-teams", response_model=List[TeamResponse])
def get_available_teams(tournament_id: str, store: Store = Depends(get_store)):
    """Teams that can still be added to the tournament"""
    _get_tournament(store, tournament_id)
    query = RosterReconciler(store).fetch_available_teams(tournament_id)
    if not query.ok:
        raise HTTPException(status_code=ROSTER_ERROR_STATUS[query.error], detail="Failed to load available teams")
    return [TeamResponse.from_record(t) for t in query.teams]


@router.post("/{tournament_id}/teams", response_model=RosterMutationResponse)
def add_teams(
    tournament_id: str,
    request: AddTeamsRequest,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Add the selected teams to the tournament"""
    tournament = _get_tournament(store, tournament_id)
    reconciler = RosterReconciler(store)
    outcome = reconciler.add_teams(tournament_id, request.team_ids, created_by=current_user.id)
    return _mutation_response(outcome, reconciler, tournament)


@router.delete("/{tournament_id}/teams/{team_id}", response_model=RosterMutationResponse)
def remove_team(
    tournament_id: str,
    team_id: str,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """
    Remove a team from the tournament.
    A team that is already gone is reported with already_removed and the refreshed roster.
    """
    tournament = _get_tournament(store, tournament_id)
    reconciler = RosterReconciler(store)
    outcome = reconciler.remove_team(tournament_id, team_id)
    return _mutation_response(outcome, reconciler, tournament)
