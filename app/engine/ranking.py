"""
Ranking Computer - leaderboard and dashboard orderings over player/team stats
"""
import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar, Union

from app.engine.records import MatchRecord, PlayerRecord, TeamRecord
from app.models.match import MatchStatus

T = TypeVar("T")


def derived_average(total: float, count: float) -> float:
    """total / count, or 0 when there is nothing to divide by"""
    return total / count if count > 0 else 0


def runs(player: PlayerRecord) -> float:
    return player.stats.runs


def wickets(player: PlayerRecord) -> float:
    return player.stats.wickets


def runs_per_match(player: PlayerRecord) -> float:
    return derived_average(player.stats.runs, player.stats.matches)


def wickets_per_match(player: PlayerRecord) -> float:
    return derived_average(player.stats.wickets, player.stats.matches)


def win_ratio(team: TeamRecord) -> float:
    return derived_average(team.stats.won, team.stats.matches)


def win_percentage(team: TeamRecord) -> float:
    return win_ratio(team) * 100


def loss_percentage(team: TeamRecord) -> float:
    return derived_average(team.stats.lost, team.stats.matches) * 100


def draw_percentage(team: TeamRecord) -> float:
    return derived_average(team.stats.draw, team.stats.matches) * 100


class Metric(enum.Enum):
    RUNS = "runs"
    WICKETS = "wickets"
    RUNS_PER_MATCH = "runs_per_match"
    WICKETS_PER_MATCH = "wickets_per_match"
    WIN_RATIO = "win_ratio"

    @property
    def func(self) -> Callable:
        return METRIC_FUNCS[self]


METRIC_FUNCS = {
    Metric.RUNS: runs,
    Metric.WICKETS: wickets,
    Metric.RUNS_PER_MATCH: runs_per_match,
    Metric.WICKETS_PER_MATCH: wickets_per_match,
    Metric.WIN_RATIO: win_ratio,
}


def top_by_metric(
    items: Iterable[T],
    metric: Union[Metric, Callable[[T], float]],
    limit: Optional[int] = None,
) -> list[T]:
    """
    Items sorted by metric, highest first.

    The sort is stable: items with equal metric values keep their input order
    (sorted() with reverse=True preserves it). A limit of None returns
    everything; limits below zero are treated as zero.
    """
    key = metric.func if isinstance(metric, Metric) else metric
    ranked = sorted(items, key=key, reverse=True)
    if limit is not None:
        ranked = ranked[:max(limit, 0)]
    return ranked


def _field_value(item, name: str):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def filter_by_text(items: Sequence[T], query: Optional[str], fields: Sequence[str]) -> list[T]:
    """Case-insensitive substring match on any of the given fields. An empty query keeps everything."""
    if not query:
        return list(items)
    needle = query.lower()
    matched = []
    for item in items:
        for name in fields:
            value = _field_value(item, name)
            if value is not None and needle in str(value).lower():
                matched.append(item)
                break
    return matched


def filter_by_field(items: Sequence[T], name: str, value) -> list[T]:
    """
    Exact match on one field (role, status filters). A value of None keeps everything.

    Enum fields compare equal to either the member or its raw value.
    """
    if value is None:
        return list(items)
    wanted = value.value if isinstance(value, enum.Enum) else value
    matched = []
    for item in items:
        current = _field_value(item, name)
        if isinstance(current, enum.Enum):
            current = current.value
        if current == wanted:
            matched.append(item)
    return matched


def upcoming_matches(matches: Iterable[MatchRecord]) -> list[MatchRecord]:
    """Upcoming matches, soonest first"""
    pending = [m for m in matches if m.status == MatchStatus.UPCOMING]
    return sorted(pending, key=lambda m: m.date or datetime.max)


def recent_matches(matches: Iterable[MatchRecord]) -> list[MatchRecord]:
    """Completed matches, latest first"""
    done = [m for m in matches if m.status == MatchStatus.COMPLETED]
    return sorted(done, key=lambda m: m.date or datetime.min, reverse=True)


@dataclass
class RankedEntry:
    """One leaderboard row"""
    rank: int
    item: object
    value: float


@dataclass
class Leaderboard:
    top_batsmen: list[RankedEntry] = field(default_factory=list)
    top_bowlers: list[RankedEntry] = field(default_factory=list)
    top_teams: list[RankedEntry] = field(default_factory=list)


SEARCH_FIELDS = ("name", "college")


def rank_entries(items: Iterable[T], display: Callable[[T], float]) -> list[RankedEntry]:
    return [RankedEntry(rank=i, item=item, value=display(item)) for i, item in enumerate(items, 1)]


def build_leaderboard(
    players: Sequence[PlayerRecord],
    teams: Sequence[TeamRecord],
    search: Optional[str] = None,
    limit: Optional[int] = None,
) -> Leaderboard:
    """
    Batsmen ranked by runs, bowlers by wickets, teams by win ratio.

    The search narrows each list after ranking; ranks are positions within
    the narrowed list.
    """
    batsmen = filter_by_text(top_by_metric(players, Metric.RUNS), search, SEARCH_FIELDS)
    bowlers = filter_by_text(top_by_metric(players, Metric.WICKETS), search, SEARCH_FIELDS)
    ranked_teams = filter_by_text(top_by_metric(teams, Metric.WIN_RATIO), search, SEARCH_FIELDS)

    if limit is not None:
        batsmen, bowlers, ranked_teams = (
            lst[:max(limit, 0)] for lst in (batsmen, bowlers, ranked_teams)
        )

    return Leaderboard(
        top_batsmen=rank_entries(batsmen, runs_per_match),
        top_bowlers=rank_entries(bowlers, wickets_per_match),
        top_teams=rank_entries(ranked_teams, win_percentage),
    )
