"""
CLI tests - commands run against the in-memory test database.
"""
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def run(test_db):
    """Invoke a CLI command with the test session in place of the app database"""
    runner = CliRunner()

    def _run(*args):
        with patch("cli.init_db"), patch("cli.get_session", return_value=test_db):
            return runner.invoke(cli, list(args))
    return _run


class TestGeneratePlayers:
    def test_saves_squad_to_team(self, run, store, make_team):
        team = make_team("DCE Thunder")

        result = run("generate-players", "--college", "DCE", "--count", "5", "--team-id", team["id"])

        assert result.exit_code == 0, result.output
        assert "5 players saved" in result.output
        assert len(store.select("players", team_id=team["id"])) == 5

    def test_unknown_team_is_reported(self, run, store):
        result = run("generate-players", "--college", "DCE", "--team-id", "no-such-team")

        assert result.exit_code == 0
        assert result.exception is None
        assert "Could not save players" in result.output
        assert store.select("players") == []


class TestRosterCommands:
    def test_add_and_remove(self, run, store, tournament, catalog):
        tid = tournament["id"]

        added = run("roster", "add", tid, catalog["A"]["id"], catalog["B"]["id"])
        assert "Teams added to tournament successfully" in added.output
        assert "2/8 teams" in added.output

        run("roster", "remove", tid, catalog["A"]["id"])
        again = run("roster", "remove", tid, catalog["A"]["id"])

        assert "already removed" in again.output
        assert len(store.select("tournament_teams", tournament_id=tid)) == 1
