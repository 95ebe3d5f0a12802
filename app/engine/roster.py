"""
Roster Reconciler - keeps a tournament's roster in step with tournament_teams
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from app.engine.records import MembershipRecord, TeamRecord
from app.errors import ConstraintViolation, DuplicateRow, StoreUnavailable
from app.store import Store

logger = logging.getLogger(__name__)

MEMBERSHIPS = "tournament_teams"


class RosterError(enum.Enum):
    VALIDATION_ERROR = "validation_error"
    DUPLICATE_MEMBERSHIP = "duplicate_membership"
    MEMBERSHIP_NOT_FOUND = "membership_not_found"
    STORE_UNAVAILABLE = "store_unavailable"

    @property
    def is_fatal(self) -> bool:
        # A missing membership only means the caller's view is stale
        return self is not RosterError.MEMBERSHIP_NOT_FOUND


@dataclass
class RosterOutcome:
    """Result of a roster mutation. Callers re-query the roster to refresh."""
    ok: bool
    error: Optional[RosterError] = None
    message: str = ""
    team_ids: list[str] = field(default_factory=list)

    @classmethod
    def success(cls, team_ids: list[str], message: str = "") -> "RosterOutcome":
        return cls(ok=True, team_ids=team_ids, message=message)

    @classmethod
    def failure(cls, error: RosterError, message: str, team_ids: Optional[list[str]] = None) -> "RosterOutcome":
        return cls(ok=False, error=error, message=message, team_ids=team_ids or [])


@dataclass
class RosterQuery:
    """Result of a roster read"""
    teams: list[TeamRecord] = field(default_factory=list)
    error: Optional[RosterError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def available_teams(all_teams: Iterable[TeamRecord], memberships: Iterable[MembershipRecord]) -> list[TeamRecord]:
    """Catalog teams not yet in the tournament, in catalog order"""
    joined = {m.team_id for m in memberships}
    return [t for t in all_teams if t.id not in joined]


def project_roster(all_teams: Iterable[TeamRecord], memberships: Iterable[MembershipRecord]) -> list[TeamRecord]:
    """Membership join Team, in membership order. Memberships whose team is gone are skipped."""
    by_id = {t.id: t for t in all_teams}
    roster = []
    seen = set()
    for m in memberships:
        if m.team_id in by_id and m.team_id not in seen:
            roster.append(by_id[m.team_id])
            seen.add(m.team_id)
    return roster


class RosterReconciler:
    """
    Reads and mutates the team roster of tournaments.

    Holds no state besides the store: every call re-reads tournament_teams,
    and the mutations only report an outcome. None of the public methods
    raise for store failures - they come back as RosterOutcome / RosterQuery.
    """

    def __init__(self, store: Store):
        self.store = store

    def _memberships(self, tournament_id: str) -> list[MembershipRecord]:
        rows = self.store.select(MEMBERSHIPS, tournament_id=tournament_id)
        return [MembershipRecord.from_row(r) for r in rows]

    def _catalog(self) -> list[TeamRecord]:
        return [TeamRecord.from_row(r) for r in self.store.select("teams")]

    def _fetch_both(self, tournament_id: str):
        # Both reads must resolve before anything is projected
        memberships = self._memberships(tournament_id)
        catalog = self._catalog()
        return catalog, memberships

    def roster(self, tournament_id: str) -> RosterQuery:
        """Teams currently in the tournament. An empty roster is not an error."""
        try:
            catalog, memberships = self._fetch_both(tournament_id)
        except StoreUnavailable as e:
            return RosterQuery(error=RosterError.STORE_UNAVAILABLE, message=e.message)
        return RosterQuery(teams=project_roster(catalog, memberships))

    def fetch_available_teams(self, tournament_id: str) -> RosterQuery:
        """Teams that can still be added to the tournament"""
        try:
            catalog, memberships = self._fetch_both(tournament_id)
        except StoreUnavailable as e:
            return RosterQuery(error=RosterError.STORE_UNAVAILABLE, message=e.message)
        return RosterQuery(teams=available_teams(catalog, memberships))

    def add_teams(self, tournament_id: str, team_ids: Iterable[str], created_by: Optional[str] = None) -> RosterOutcome:
        """
        Add teams to a tournament as one batch.

        Rejects an empty selection and ids missing from the team catalog
        before writing anything. Pairs that already exist fail the whole
        batch with DUPLICATE_MEMBERSHIP; nothing is written in that case.
        """
        # Repeated ids collapse to the first occurrence
        requested = list(dict.fromkeys(team_ids or []))
        if not requested:
            return RosterOutcome.failure(RosterError.VALIDATION_ERROR, "Please select at least one team to add")

        try:
            known = {r["id"] for r in self.store.select("teams", id=requested)}
            unknown = [t for t in requested if t not in known]
            if unknown:
                return RosterOutcome.failure(
                    RosterError.VALIDATION_ERROR, f"Unknown team ids: {', '.join(unknown)}", unknown
                )

            existing = self.store.select(MEMBERSHIPS, tournament_id=tournament_id, team_id=requested)
            if existing:
                duplicates = [r["team_id"] for r in existing]
                return RosterOutcome.failure(
                    RosterError.DUPLICATE_MEMBERSHIP, "Some teams are already in this tournament", duplicates
                )

            self.store.insert(MEMBERSHIPS, [
                {"tournament_id": tournament_id, "team_id": team_id, "created_by": created_by}
                for team_id in requested
            ])
        except DuplicateRow:
            # Unique constraint fired between the check and the insert
            return RosterOutcome.failure(
                RosterError.DUPLICATE_MEMBERSHIP, "Some teams are already in this tournament", requested
            )
        except ConstraintViolation:
            return RosterOutcome.failure(RosterError.VALIDATION_ERROR, f"Unknown tournament: {tournament_id}")
        except StoreUnavailable as e:
            return RosterOutcome.failure(RosterError.STORE_UNAVAILABLE, "Failed to add teams to tournament: " + e.message)

        logger.info("Added %d team(s) to tournament %s", len(requested), tournament_id)
        return RosterOutcome.success(requested, "Teams added to tournament successfully")

    def remove_team(self, tournament_id: str, team_id: str) -> RosterOutcome:
        """
        Remove a team from a tournament.

        The membership is read before it is deleted; when it is already gone
        the outcome is MEMBERSHIP_NOT_FOUND, which is not fatal - the caller
        refreshes its roster. Removing twice leaves the table unchanged.
        """
        try:
            existing = self.store.select_one(MEMBERSHIPS, tournament_id=tournament_id, team_id=team_id)
            if existing is None:
                logger.info("Team %s is not in tournament %s", team_id, tournament_id)
                return RosterOutcome.failure(
                    RosterError.MEMBERSHIP_NOT_FOUND,
                    "Team is not associated with this tournament",
                    [team_id],
                )
            self.store.delete(MEMBERSHIPS, tournament_id=tournament_id, team_id=team_id)
        except StoreUnavailable as e:
            return RosterOutcome.failure(
                RosterError.STORE_UNAVAILABLE, "Failed to remove team from tournament: " + e.message, [team_id]
            )

        logger.info("Removed team %s from tournament %s", team_id, tournament_id)
        return RosterOutcome.success([team_id], "Team removed from tournament")
