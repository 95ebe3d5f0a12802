"""
Tests for tournament roster reconciliation.
"""
from unittest.mock import MagicMock

import pytest

from app.engine.records import MembershipRecord, TeamRecord
from app.engine.roster import (
    RosterReconciler, RosterError, available_teams, project_roster
)
from app.errors import DuplicateRow, StoreUnavailable


def team(tid):
    return TeamRecord(id=tid, name=f"Team {tid}", college="College")


def membership(team_id, tournament_id="T"):
    return MembershipRecord(tournament_id=tournament_id, team_id=team_id)


class TestAvailableTeams:
    def test_excludes_joined_teams_in_catalog_order(self):
        catalog = [team("A"), team("B"), team("C"), team("D")]
        result = available_teams(catalog, [membership("C"), membership("A")])
        assert [t.id for t in result] == ["B", "D"]

    def test_empty_memberships_returns_catalog(self):
        catalog = [team("A"), team("B")]
        assert available_teams(catalog, []) == catalog

    def test_empty_catalog_returns_empty(self):
        assert available_teams([], [membership("A")]) == []

    def test_result_disjoint_from_roster(self):
        catalog = [team(x) for x in "ABCDEF"]
        memberships = [membership("B"), membership("E")]
        available = {t.id for t in available_teams(catalog, memberships)}
        joined = {m.team_id for m in memberships}
        assert available.isdisjoint(joined)
        assert available | joined == {t.id for t in catalog}


class TestProjectRoster:
    def test_follows_membership_order(self):
        catalog = [team("A"), team("B"), team("C")]
        roster = project_roster(catalog, [membership("C"), membership("A")])
        assert [t.id for t in roster] == ["C", "A"]

    def test_skips_memberships_without_team(self):
        roster = project_roster([team("A")], [membership("A"), membership("ghost")])
        assert [t.id for t in roster] == ["A"]


class TestRosterReconciler:
    @pytest.fixture
    def reconciler(self, store):
        return RosterReconciler(store)

    def ids(self, catalog, names):
        return [catalog[n]["id"] for n in names]

    def test_empty_roster_is_not_an_error(self, reconciler, tournament, catalog):
        query = reconciler.roster(tournament["id"])
        assert query.ok
        assert query.teams == []

    def test_add_then_available(self, reconciler, store, tournament, make_team):
        a, b, c = make_team("A"), make_team("B"), make_team("C")

        outcome = reconciler.add_teams(tournament["id"], [a["id"]])

        assert outcome.ok
        assert outcome.team_ids == [a["id"]]
        available = reconciler.fetch_available_teams(tournament["id"])
        assert [t.id for t in available.teams] == [b["id"], c["id"]]

    def test_end_to_end_roster_of_eight(self, reconciler, store, tournament, catalog):
        tid = tournament["id"]
        assert reconciler.add_teams(tid, self.ids(catalog, "AB")).ok

        outcome = reconciler.add_teams(tid, self.ids(catalog, "CD"))

        assert outcome.ok
        available = reconciler.fetch_available_teams(tid)
        assert [t.id for t in available.teams] == self.ids(catalog, "EF")
        roster = reconciler.roster(tid)
        assert [t.id for t in roster.teams] == self.ids(catalog, "ABCD")
        assert f"{len(roster.teams)}/{tournament['team_count']}" == "4/8"

    def test_empty_selection_rejected_before_store(self, tournament):
        mock_store = MagicMock()
        outcome = RosterReconciler(mock_store).add_teams(tournament["id"], [])

        assert not outcome.ok
        assert outcome.error is RosterError.VALIDATION_ERROR
        mock_store.select.assert_not_called()
        mock_store.insert.assert_not_called()

    def test_unknown_team_rejected(self, reconciler, store, tournament, catalog):
        outcome = reconciler.add_teams(tournament["id"], [catalog["A"]["id"], "no-such-team"])

        assert outcome.error is RosterError.VALIDATION_ERROR
        assert outcome.team_ids == ["no-such-team"]
        assert store.select("tournament_teams", tournament_id=tournament["id"]) == []

    def test_unknown_tournament_rejected(self, reconciler, store, catalog):
        outcome = reconciler.add_teams("no-such-tournament", [catalog["A"]["id"]])

        assert outcome.error is RosterError.VALIDATION_ERROR
        assert store.select("tournament_teams") == []

    def test_repeated_ids_collapse(self, reconciler, store, tournament, catalog):
        a = catalog["A"]["id"]
        outcome = reconciler.add_teams(tournament["id"], [a, a])

        assert outcome.ok
        assert outcome.team_ids == [a]
        assert len(store.select("tournament_teams", tournament_id=tournament["id"])) == 1

    def test_duplicate_membership_writes_nothing(self, reconciler, store, tournament, catalog):
        tid = tournament["id"]
        reconciler.add_teams(tid, self.ids(catalog, "A"))

        outcome = reconciler.add_teams(tid, self.ids(catalog, "BA"))

        assert not outcome.ok
        assert outcome.error is RosterError.DUPLICATE_MEMBERSHIP
        assert outcome.team_ids == self.ids(catalog, "A")
        rows = store.select("tournament_teams", tournament_id=tid)
        assert [r["team_id"] for r in rows] == self.ids(catalog, "A")

    def test_unique_constraint_backstop(self, tournament):
        """A duplicate that slips past the pre-check is still reported, not raised"""
        mock_store = MagicMock()
        mock_store.select.side_effect = [[{"id": "A"}], []]
        mock_store.insert.side_effect = DuplicateRow()

        outcome = RosterReconciler(mock_store).add_teams(tournament["id"], ["A"])

        assert outcome.error is RosterError.DUPLICATE_MEMBERSHIP

    def test_store_failure_on_add(self):
        mock_store = MagicMock()
        mock_store.select.side_effect = StoreUnavailable()

        outcome = RosterReconciler(mock_store).add_teams("T", ["A"])

        assert outcome.error is RosterError.STORE_UNAVAILABLE
        assert outcome.error.is_fatal
        mock_store.insert.assert_not_called()

    def test_store_failure_on_read(self):
        mock_store = MagicMock()
        mock_store.select.side_effect = StoreUnavailable()

        reconciler = RosterReconciler(mock_store)

        assert reconciler.roster("T").error is RosterError.STORE_UNAVAILABLE
        assert reconciler.fetch_available_teams("T").error is RosterError.STORE_UNAVAILABLE

    def test_remove_team(self, reconciler, store, tournament, catalog):
        tid = tournament["id"]
        reconciler.add_teams(tid, self.ids(catalog, "AB"))

        outcome = reconciler.remove_team(tid, catalog["A"]["id"])

        assert outcome.ok
        assert [t.id for t in reconciler.roster(tid).teams] == self.ids(catalog, "B")

    def test_remove_twice_is_idempotent(self, reconciler, store, tournament, catalog):
        tid = tournament["id"]
        reconciler.add_teams(tid, self.ids(catalog, "AB"))
        assert reconciler.remove_team(tid, catalog["A"]["id"]).ok
        after_first = store.select("tournament_teams", tournament_id=tid)

        second = reconciler.remove_team(tid, catalog["A"]["id"])

        assert not second.ok
        assert second.error is RosterError.MEMBERSHIP_NOT_FOUND
        assert not second.error.is_fatal
        assert store.select("tournament_teams", tournament_id=tid) == after_first

    def test_remove_checks_before_deleting(self):
        mock_store = MagicMock()
        mock_store.select_one.return_value = None

        outcome = RosterReconciler(mock_store).remove_team("T", "A")

        assert outcome.error is RosterError.MEMBERSHIP_NOT_FOUND
        mock_store.delete.assert_not_called()

    def test_store_failure_on_remove(self):
        mock_store = MagicMock()
        mock_store.select_one.return_value = {"tournament_id": "T", "team_id": "A"}
        mock_store.delete.side_effect = StoreUnavailable()

        outcome = RosterReconciler(mock_store).remove_team("T", "A")

        assert outcome.error is RosterError.STORE_UNAVAILABLE

    def test_deleting_team_drops_membership(self, reconciler, store, tournament, catalog):
        tid = tournament["id"]
        reconciler.add_teams(tid, self.ids(catalog, "AB"))

        store.delete("teams", id=catalog["A"]["id"])

        assert [t.id for t in reconciler.roster(tid).teams] == self.ids(catalog, "B")
        assert len(store.select("tournament_teams", tournament_id=tid)) == 1
