#!/usr/bin/env python3
"""
CLI for College Cricket Connect
"""
import logging
import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from app.config import settings
from app.database import init_db, get_session
from app.engine import ranking
from app.engine.records import PlayerRecord, TeamRecord, TournamentRecord
from app.engine.roster import RosterReconciler, RosterError
from app.errors import CricketConnectError
from app.generators import PlayerGenerator, SampleDataGenerator
from app.models.player import PlayerRole
from app.store import Store

console = Console()


@click.group()
@click.option("--log-level", default=settings.LOG_LEVEL, help="Logging level")
def cli(log_level: str):
    """College Cricket Connect - college cricket management"""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command()
def init():
    """Initialize the database"""
    console.print("[yellow]Initializing database...[/yellow]")
    init_db()
    console.print("[green]Database initialized successfully![/green]")


@cli.command()
def seed():
    """Load the sample colleges, players, matches and tournaments"""
    init_db()
    session = get_session()
    try:
        counts = SampleDataGenerator.seed(Store(session))
    finally:
        session.close()

    console.print("[green]Sample data loaded:[/green]")
    for table, count in counts.items():
        console.print(f"  {table}: {count}")


@cli.command()
@click.option("--count", default=11, help="Number of players to generate")
@click.option("--college", required=True, help="College the players study at")
@click.option("--team-id", default=None, help="Team to place the players in")
def generate_players(count: int, college: str, team_id: str):
    """Generate a fictional college squad"""
    console.print(f"[yellow]Generating {count} players for {college}...[/yellow]")

    init_db()
    players = PlayerGenerator.generate_squad(college, count, team_id)

    session = get_session()
    try:
        PlayerGenerator.save_players(Store(session), players)
    except CricketConnectError as e:
        console.print(f"[red]Could not save players: {e.message}[/red]")
        return
    finally:
        session.close()

    table = Table(title="Generated Players")
    table.add_column("Name", style="cyan")
    table.add_column("Age")
    table.add_column("Role", style="magenta")
    table.add_column("M", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Wkts", justify="right")
    for p in players:
        table.add_row(p["name"], str(p["age"]), p["role"], str(p["matches"]), str(p["runs"]), str(p["wickets"]))
    console.print(table)
    console.print(f"[green]{len(players)} players saved to database![/green]")

    roles = {}
    for p in players:
        roles[p["role"]] = roles.get(p["role"], 0) + 1
    console.print("\n[bold]Role Distribution:[/bold]")
    for role, n in sorted(roles.items()):
        console.print(f"  {role}: {n}")


@cli.command()
@click.option("--search", default="", help="Match name or college")
@click.option("--role", type=click.Choice([r.value for r in PlayerRole]), default=None, help="Only this role")
def list_players(search: str, role: str):
    """List players"""
    session = get_session()
    try:
        players = [PlayerRecord.from_row(r) for r in Store(session).select("players")]
    finally:
        session.close()

    players = ranking.filter_by_text(players, search, ranking.SEARCH_FIELDS)
    players = ranking.filter_by_field(players, "role", role)

    if not players:
        console.print("[red]No players found. Run 'seed' first.[/red]")
        return

    table = Table(title=f"Players ({len(players)} total)")
    table.add_column("ID")
    table.add_column("Name", style="cyan")
    table.add_column("Age")
    table.add_column("College")
    table.add_column("Role", style="magenta")
    table.add_column("M", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Wkts", justify="right")
    table.add_column("HS", justify="right")
    table.add_column("BB", justify="right")

    for p in players:
        table.add_row(
            p.id,
            p.name,
            str(p.age),
            p.college,
            p.role.value,
            str(p.stats.matches),
            str(p.stats.runs),
            str(p.stats.wickets),
            str(p.stats.highest_score),
            p.stats.best_bowling,
        )

    console.print(table)


@cli.command()
@click.option("--search", default="", help="Match name or college")
def list_teams(search: str):
    """List teams"""
    session = get_session()
    try:
        teams = [TeamRecord.from_row(r) for r in Store(session).select("teams")]
    finally:
        session.close()

    teams = ranking.filter_by_text(teams, search, ranking.SEARCH_FIELDS)
    if not teams:
        console.print("[red]No teams found. Run 'seed' first.[/red]")
        return

    table = Table(title=f"Teams ({len(teams)} total)")
    table.add_column("ID")
    table.add_column("Name", style="cyan")
    table.add_column("College")
    table.add_column("M", justify="right")
    table.add_column("W", justify="right")
    table.add_column("L", justify="right")
    table.add_column("D", justify="right")
    table.add_column("Win %", justify="right", style="green")

    for t in teams:
        table.add_row(
            t.id,
            t.name,
            t.college,
            str(t.stats.matches),
            str(t.stats.won),
            str(t.stats.lost),
            str(t.stats.draw),
            f"{ranking.win_percentage(t):.1f}%",
        )

    console.print(table)


@cli.command()
def list_tournaments():
    """List tournaments"""
    session = get_session()
    try:
        tournaments = [TournamentRecord.from_row(r) for r in Store(session).select("tournaments")]
    finally:
        session.close()

    table = Table(title="Tournaments")
    table.add_column("ID")
    table.add_column("Name", style="cyan")
    table.add_column("Dates")
    table.add_column("Location")
    table.add_column("Status", style="magenta")
    table.add_column("Teams", justify="right")

    for t in tournaments:
        table.add_row(t.id, t.name, f"{t.start_date} - {t.end_date}", t.location, t.status.value, str(t.team_count))

    console.print(table)


@cli.command()
@click.option("--search", default="", help="Match name or college")
@click.option("--limit", default=None, type=int, help="Rows per table")
def leaderboard(search: str, limit: int):
    """Top batsmen, bowlers and teams"""
    session = get_session()
    try:
        store = Store(session)
        players = [PlayerRecord.from_row(r) for r in store.select("players")]
        teams = [TeamRecord.from_row(r) for r in store.select("teams")]
    finally:
        session.close()

    board = ranking.build_leaderboard(players, teams, search=search, limit=limit)

    sections = [
        ("Batsmen", "Runs", lambda p: p.stats.runs, "Runs/Match", board.top_batsmen, "{:.2f}"),
        ("Bowlers", "Wickets", lambda p: p.stats.wickets, "Wkts/Match", board.top_bowlers, "{:.2f}"),
        ("Teams", "Won", lambda t: t.stats.won, "Win %", board.top_teams, "{:.1f}%"),
    ]
    for title, total_label, total, value_label, entries, fmt in sections:
        table = Table(title=title)
        table.add_column("#", justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("College")
        table.add_column(total_label, justify="right")
        table.add_column(value_label, justify="right", style="green")
        for e in entries:
            table.add_row(str(e.rank), e.item.name, e.item.college, str(total(e.item)), fmt.format(e.value))
        if not entries:
            table.add_row("", "No results found.", "", "", "")
        console.print(table)


@cli.group()
def roster():
    """Manage the teams in a tournament"""


def _print_roster(store: Store, tournament_id: str):
    row = store.select_one("tournaments", id=tournament_id)
    if row is None:
        console.print(f"[red]Tournament {tournament_id} not found[/red]")
        return
    tournament = TournamentRecord.from_row(row)
    query = RosterReconciler(store).roster(tournament_id)
    if not query.ok:
        console.print(f"[red]{query.message}[/red]")
        return

    console.print(Panel(f"[bold]{tournament.name}[/bold] - {len(query.teams)}/{tournament.team_count} teams"))
    if not query.teams:
        console.print("[yellow]No teams have joined this tournament yet.[/yellow]")
    for t in query.teams:
        console.print(f"  {t.id}  {t.name} - {t.college}")


@roster.command("show")
@click.argument("tournament_id")
def roster_show(tournament_id: str):
    """Show a tournament's teams"""
    session = get_session()
    try:
        _print_roster(Store(session), tournament_id)
    finally:
        session.close()


@roster.command("add")
@click.argument("tournament_id")
@click.argument("team_ids", nargs=-1)
def roster_add(tournament_id: str, team_ids: tuple):
    """Add teams to a tournament"""
    session = get_session()
    try:
        store = Store(session)
        outcome = RosterReconciler(store).add_teams(tournament_id, list(team_ids))
        if outcome.ok:
            console.print(f"[green]{outcome.message}[/green]")
        else:
            console.print(f"[red]{outcome.message}[/red]")
        _print_roster(store, tournament_id)
    finally:
        session.close()


@roster.command("remove")
@click.argument("tournament_id")
@click.argument("team_id")
def roster_remove(tournament_id: str, team_id: str):
    """Remove a team from a tournament"""
    session = get_session()
    try:
        store = Store(session)
        outcome = RosterReconciler(store).remove_team(tournament_id, team_id)
        if outcome.ok:
            console.print(f"[green]{outcome.message}[/green]")
        elif outcome.error is RosterError.MEMBERSHIP_NOT_FOUND:
            console.print(f"[yellow]{outcome.message} - already removed[/yellow]")
        else:
            console.print(f"[red]{outcome.message}[/red]")
        _print_roster(store, tournament_id)
    finally:
        session.close()


@roster.command("available")
@click.argument("tournament_id")
def roster_available(tournament_id: str):
    """List teams that can still join a tournament"""
    session = get_session()
    try:
        query = RosterReconciler(Store(session)).fetch_available_teams(tournament_id)
    finally:
        session.close()

    if not query.ok:
        console.print(f"[red]{query.message}[/red]")
        return
    if not query.teams:
        console.print("[yellow]No teams available to add.[/yellow]")
    for t in query.teams:
        console.print(f"  {t.id}  {t.name} - {t.college}")


if __name__ == "__main__":
    cli()
