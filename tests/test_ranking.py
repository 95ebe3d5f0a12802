"""
Tests for leaderboard ranking, filtering and averages.
"""
from datetime import datetime

import pytest

from app.engine import ranking
from app.engine.ranking import Metric
from app.engine.records import (
    MatchRecord, PlayerRecord, PlayerStats, TeamRecord, TeamStats
)
from app.models.match import MatchStatus
from app.models.player import PlayerRole


def player(pid, runs=0, wickets=0, matches=10, name=None, college="DCE", role=PlayerRole.BATSMAN):
    return PlayerRecord(
        id=pid,
        name=name or f"Player {pid}",
        college=college,
        age=20,
        role=role,
        stats=PlayerStats(matches=matches, runs=runs, wickets=wickets),
    )


def team(tid, matches, won, name=None, college="DCE"):
    return TeamRecord(id=tid, name=name or f"Team {tid}", college=college,
                      stats=TeamStats(matches=matches, won=won))


def match(mid, status, when):
    return MatchRecord(id=mid, team1_id="t1", team2_id="t2", date=when, venue="Ground", status=status)


class TestDerivedAverage:
    def test_zero_over_zero_is_zero(self):
        assert ranking.derived_average(0, 0) == 0

    def test_total_over_zero_is_zero(self):
        assert ranking.derived_average(45, 0) == 0

    def test_regular_division(self):
        assert ranking.derived_average(90, 3) == 30


class TestTopByMetric:
    def test_ties_keep_input_order(self):
        """Equal runs keep the order they came in"""
        players = [player("1", runs=50), player("2", runs=50), player("3", runs=80)]
        ranked = ranking.top_by_metric(players, Metric.RUNS)
        assert [p.id for p in ranked] == ["3", "1", "2"]

    def test_ties_keep_input_order_when_reversed(self):
        players = [player("2", runs=50), player("1", runs=50), player("3", runs=80)]
        ranked = ranking.top_by_metric(players, Metric.RUNS)
        assert [p.id for p in ranked] == ["3", "2", "1"]

    def test_limit_truncates(self):
        players = [player(str(i), wickets=i) for i in range(6)]
        ranked = ranking.top_by_metric(players, Metric.WICKETS, limit=3)
        assert [p.id for p in ranked] == ["5", "4", "3"]

    def test_no_limit_returns_everything(self):
        players = [player(str(i), runs=i) for i in range(4)]
        assert len(ranking.top_by_metric(players, Metric.RUNS)) == 4

    def test_negative_limit_returns_nothing(self):
        assert ranking.top_by_metric([player("1", runs=1)], Metric.RUNS, limit=-2) == []

    def test_win_ratio_with_no_matches_is_zero(self):
        teams = [team("a", matches=0, won=0), team("b", matches=4, won=1)]
        ranked = ranking.top_by_metric(teams, Metric.WIN_RATIO)
        assert [t.id for t in ranked] == ["b", "a"]
        assert ranking.win_ratio(teams[0]) == 0

    def test_runs_per_match_with_no_matches_is_zero(self):
        assert ranking.runs_per_match(player("1", runs=40, matches=0)) == 0

    def test_accepts_callable_metric(self):
        players = [player("1", runs=10), player("2", runs=30)]
        ranked = ranking.top_by_metric(players, lambda p: -p.stats.runs)
        assert [p.id for p in ranked] == ["1", "2"]

    def test_input_is_not_mutated(self):
        players = [player("1", runs=1), player("2", runs=2)]
        ranking.top_by_metric(players, Metric.RUNS)
        assert [p.id for p in players] == ["1", "2"]


class TestFilterByText:
    def test_matches_college_case_insensitively(self):
        items = [{"name": "Raj Sharma", "college": "DCE"}]
        assert ranking.filter_by_text(items, "dce", ["name", "college"]) == items

    def test_empty_query_returns_input(self):
        items = [{"name": "Raj Sharma", "college": "DCE"}, {"name": "Vikram", "college": "IIT"}]
        assert ranking.filter_by_text(items, "", ["name", "college"]) == items

    def test_match_on_any_field(self):
        players = [
            player("1", name="Raj Sharma", college="DCE"),
            player("2", name="Vikram Singh", college="IIT Delhi"),
            player("3", name="Amit Kumar", college="NSIT"),
        ]
        found = ranking.filter_by_text(players, "del", ["name", "college"])
        assert [p.id for p in found] == ["2"]
        found = ranking.filter_by_text(players, "SHARMA", ["name", "college"])
        assert [p.id for p in found] == ["1"]

    def test_no_match_returns_empty(self):
        assert ranking.filter_by_text([player("1")], "zzz", ["name"]) == []

    def test_missing_field_is_skipped(self):
        items = [{"name": "Raj"}]
        assert ranking.filter_by_text(items, "raj", ["college", "name"]) == items


class TestFilterByField:
    def test_filters_enum_field_by_value(self):
        players = [player("1", role=PlayerRole.BOWLER), player("2", role=PlayerRole.BATSMAN)]
        assert [p.id for p in ranking.filter_by_field(players, "role", "bowler")] == ["1"]
        assert [p.id for p in ranking.filter_by_field(players, "role", PlayerRole.BATSMAN)] == ["2"]

    def test_none_keeps_everything(self):
        players = [player("1"), player("2")]
        assert ranking.filter_by_field(players, "role", None) == players


class TestMatchOrdering:
    def test_upcoming_soonest_first(self):
        matches = [
            match("late", MatchStatus.UPCOMING, datetime(2025, 5, 2)),
            match("done", MatchStatus.COMPLETED, datetime(2025, 4, 1)),
            match("soon", MatchStatus.UPCOMING, datetime(2025, 5, 1)),
        ]
        assert [m.id for m in ranking.upcoming_matches(matches)] == ["soon", "late"]

    def test_recent_latest_first(self):
        matches = [
            match("older", MatchStatus.COMPLETED, datetime(2025, 4, 18)),
            match("live", MatchStatus.LIVE, datetime(2025, 4, 25)),
            match("newer", MatchStatus.COMPLETED, datetime(2025, 4, 20)),
        ]
        assert [m.id for m in ranking.recent_matches(matches)] == ["newer", "older"]


class TestBuildLeaderboard:
    @pytest.fixture
    def players(self):
        return [
            player("p1", runs=820, wickets=2, matches=15, name="Raj Sharma", college="DCE"),
            player("p2", runs=85, wickets=28, matches=12, name="Vikram Singh", college="IIT Delhi"),
            player("p3", runs=320, wickets=15, matches=0, name="Ankita Patel", college="LSR"),
        ]

    @pytest.fixture
    def teams(self):
        return [
            team("t1", matches=8, won=6, name="DCE Thunder", college="DCE"),
            team("t2", matches=7, won=5, name="IIT Strikers", college="IIT Delhi"),
            team("t3", matches=0, won=0, name="New Side", college="NSIT"),
        ]

    def test_orders_each_table(self, players, teams):
        board = ranking.build_leaderboard(players, teams)
        assert [e.item.id for e in board.top_batsmen] == ["p1", "p3", "p2"]
        assert [e.item.id for e in board.top_bowlers] == ["p2", "p3", "p1"]
        assert [e.item.id for e in board.top_teams] == ["t1", "t2", "t3"]
        assert [e.rank for e in board.top_batsmen] == [1, 2, 3]

    def test_display_values(self, players, teams):
        board = ranking.build_leaderboard(players, teams)
        assert board.top_batsmen[0].value == pytest.approx(820 / 15)
        assert board.top_batsmen[1].value == 0  # no matches played
        assert board.top_teams[0].value == pytest.approx(75.0)
        assert board.top_teams[2].value == 0

    def test_search_reranks_within_results(self, players, teams):
        board = ranking.build_leaderboard(players, teams, search="delhi")
        assert [e.item.id for e in board.top_batsmen] == ["p2"]
        assert board.top_batsmen[0].rank == 1
        assert [e.item.id for e in board.top_teams] == ["t2"]

    def test_limit(self, players, teams):
        board = ranking.build_leaderboard(players, teams, limit=1)
        assert len(board.top_batsmen) == len(board.top_bowlers) == len(board.top_teams) == 1
