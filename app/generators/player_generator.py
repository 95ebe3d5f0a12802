import random
from typing import Optional
from faker import Faker

from app.models.player import PlayerRole
from app.store import Store

fake = Faker('en_IN')


class PlayerGenerator:
    """Generates fictional college players with plausible career numbers"""

    # Role distribution
    ROLE_WEIGHTS = {
        PlayerRole.BATSMAN: 40,
        PlayerRole.BOWLER: 35,
        PlayerRole.ALL_ROUNDER: 25,
    }

    BATTING_STYLES = [("Right-handed", 70), ("Left-handed", 30)]

    BOWLING_STYLES = [
        ("Right-arm fast", 25),
        ("Right-arm medium", 25),
        ("Off-spin", 20),
        ("Leg-spin", 15),
        ("Left-arm orthodox", 15),
    ]

    # (runs per match, wickets per match) ranges by role
    PRODUCTION = {
        PlayerRole.BATSMAN: ((25, 55), (0.0, 0.2)),
        PlayerRole.BOWLER: ((3, 10), (1.2, 2.5)),
        PlayerRole.ALL_ROUNDER: ((15, 35), (0.8, 1.6)),
    }

    @staticmethod
    def _weighted_choice(options):
        values, weights = zip(*options)
        return random.choices(values, weights=weights, k=1)[0]

    @classmethod
    def generate_player(cls, college: str, role: PlayerRole = None, team_id: Optional[str] = None) -> dict:
        """
        Generate a single player row.

        Args:
            college: College the player studies at
            role: Specific role, or weighted random if None
            team_id: Team to place the player in, if any
        """
        if role is None:
            role = cls._weighted_choice(list(cls.ROLE_WEIGHTS.items()))

        matches = random.randint(0, 20)
        (run_lo, run_hi), (wkt_lo, wkt_hi) = cls.PRODUCTION[role]
        runs = int(matches * random.uniform(run_lo, run_hi))
        wickets = int(matches * random.uniform(wkt_lo, wkt_hi))

        # A single innings can't exceed the career total
        highest_score = min(runs, random.randint(run_hi, run_hi * 3)) if matches else 0
        if wickets:
            best_wickets = min(wickets, random.randint(1, 5))
            best_bowling = f"{best_wickets}/{random.randint(best_wickets * 4, 40)}"
        else:
            best_bowling = "-"

        bowls = role in (PlayerRole.BOWLER, PlayerRole.ALL_ROUNDER)
        return {
            "name": fake.name(),
            "college": college,
            "age": random.randint(18, 24),
            "role": role.value,
            "batting_style": cls._weighted_choice(cls.BATTING_STYLES),
            "bowling_style": cls._weighted_choice(cls.BOWLING_STYLES) if bowls else None,
            "matches": matches,
            "runs": runs,
            "wickets": wickets,
            "highest_score": highest_score,
            "best_bowling": best_bowling,
            "team_id": team_id,
        }

    @classmethod
    def generate_squad(cls, college: str, count: int = 11, team_id: Optional[str] = None) -> list[dict]:
        """A squad with at least one player of every role, the rest weighted random"""
        squad = [cls.generate_player(college, role, team_id) for role in PlayerRole]
        while len(squad) < count:
            squad.append(cls.generate_player(college, team_id=team_id))
        return squad[:count]

    @classmethod
    def save_players(cls, store: Store, players: list[dict], created_by: str = None) -> list[dict]:
        """Insert generated players in one batch"""
        return store.insert("players", [p | {"created_by": created_by} for p in players])
