"""
Tests for mapping store rows to typed records.
"""
import logging
from datetime import date, datetime

from app.engine.records import (
    MatchRecord, MembershipRecord, PlayerRecord, TeamRecord, TournamentRecord, coerce_enum
)
from app.models.match import MatchStatus
from app.models.player import PlayerRole
from app.models.tournament import TournamentStatus


class TestCoerceEnum:
    def test_known_values(self):
        assert coerce_enum("live", MatchStatus, MatchStatus.UPCOMING) is MatchStatus.LIVE
        assert coerce_enum("Completed", TournamentStatus, TournamentStatus.UPCOMING) is TournamentStatus.COMPLETED

    def test_underscore_and_hyphen_are_equivalent(self):
        assert coerce_enum("all_rounder", PlayerRole, PlayerRole.BATSMAN) is PlayerRole.ALL_ROUNDER

    def test_unknown_value_defaults_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="app.engine.records"):
            status = coerce_enum("postponed", MatchStatus, MatchStatus.UPCOMING, "match m1")
        assert status is MatchStatus.UPCOMING
        assert "postponed" in caplog.text

    def test_none_defaults(self):
        assert coerce_enum(None, TournamentStatus, TournamentStatus.UPCOMING) is TournamentStatus.UPCOMING


class TestFromRow:
    def test_team(self):
        team = TeamRecord.from_row({
            "id": "t1", "name": "DCE Thunder", "college": "DCE",
            "matches_played": 8, "won": 6, "lost": 1, "drawn": 1,
        })
        assert team.stats.matches == 8
        assert team.stats.draw == 1
        assert team.captain is None

    def test_player_with_bad_role(self):
        player = PlayerRecord.from_row({"id": "p1", "name": "Raj", "college": "DCE", "age": 21, "role": "keeper"})
        assert player.role is PlayerRole.BATSMAN
        assert player.stats.runs == 0
        assert player.stats.best_bowling == "-"

    def test_tournament_with_iso_dates(self):
        tournament = TournamentRecord.from_row({
            "id": "x", "name": "Cup", "start_date": "2024-03-10", "end_date": "2024-04-25",
            "location": "Mumbai", "status": "bogus", "team_count": 12,
        })
        assert tournament.start_date == date(2024, 3, 10)
        assert tournament.status is TournamentStatus.UPCOMING

    def test_membership(self):
        m = MembershipRecord.from_row({
            "id": "m", "tournament_id": "T", "team_id": "A", "joined_at": "2024-03-01T09:30:00",
        })
        assert m.joined_at == datetime(2024, 3, 1, 9, 30)

    def test_match_result_accepts_camel_case(self):
        match = MatchRecord.from_row({
            "id": "m3", "team1_id": "t1", "team2_id": "t4", "date": "2025-04-20T10:00:00",
            "venue": "Delhi University Stadium", "status": "completed",
            "result": {"winner": "t1", "team1Score": "165/6 (20)", "team2Score": "142/8 (20)", "playerOfMatch": "p1"},
        })
        assert match.status is MatchStatus.COMPLETED
        assert match.result.team1_score == "165/6 (20)"
        assert match.result.player_of_match == "p1"

    def test_match_without_result(self):
        match = MatchRecord.from_row({
            "id": "m1", "team1_id": "t1", "team2_id": "t2", "date": datetime(2025, 5, 1, 10),
            "venue": "Ground", "status": "upcoming", "result": None,
        })
        assert match.result is None
