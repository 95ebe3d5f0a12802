"""
Sample Data Generator - demo colleges, players, matches and tournaments
"""
from datetime import date, datetime

from app.store import Store


# Keys ("t1", "p1", ...) only link the samples together; the store assigns real ids
SAMPLE_TEAMS = [
    {
        "key": "t1",
        "name": "DCE Thunder",
        "college": "Delhi College of Engineering",
        "logo_url": "/team-logos/dce.png",
        "captain": "p1",
        "matches_played": 8, "won": 6, "lost": 1, "drawn": 1,
    },
    {
        "key": "t2",
        "name": "IIT Strikers",
        "college": "IIT Delhi",
        "logo_url": "/team-logos/iit.png",
        "captain": "p2",
        "matches_played": 7, "won": 5, "lost": 2, "drawn": 0,
    },
    {
        "key": "t3",
        "name": "NSIT Warriors",
        "college": "NSIT",
        "logo_url": "/team-logos/nsit.png",
        "captain": "p6",
        "matches_played": 6, "won": 3, "lost": 2, "drawn": 1,
    },
    {
        "key": "t4",
        "name": "Lady Champions",
        "college": "Miranda House & Lady Shri Ram College",
        "logo_url": "/team-logos/lsr.png",
        "captain": None,
        "matches_played": 5, "won": 3, "lost": 2, "drawn": 0,
    },
]

SAMPLE_PLAYERS = [
    {"key": "p1", "team": "t1", "name": "Raj Sharma", "age": 21, "college": "Delhi College of Engineering",
     "role": "batsman", "matches": 15, "runs": 820, "wickets": 2, "highest_score": 112, "best_bowling": "1/12"},
    {"key": "p2", "team": "t2", "name": "Vikram Singh", "age": 20, "college": "IIT Delhi",
     "role": "bowler", "matches": 12, "runs": 85, "wickets": 28, "highest_score": 24, "best_bowling": "5/21"},
    {"key": "p3", "team": "t4", "name": "Ankita Patel", "age": 19, "college": "Lady Shri Ram College",
     "role": "all-rounder", "matches": 10, "runs": 320, "wickets": 15, "highest_score": 65, "best_bowling": "3/18"},
    {"key": "p4", "team": "t1", "name": "Prateek Verma", "age": 22, "college": "Delhi College of Engineering",
     "role": "batsman", "matches": 14, "runs": 780, "wickets": 0, "highest_score": 105, "best_bowling": "-"},
    {"key": "p5", "team": "t4", "name": "Sanjana Gupta", "age": 20, "college": "Miranda House",
     "role": "bowler", "matches": 11, "runs": 45, "wickets": 23, "highest_score": 12, "best_bowling": "4/16"},
    {"key": "p6", "team": "t3", "name": "Amit Kumar", "age": 21, "college": "NSIT",
     "role": "all-rounder", "matches": 15, "runs": 420, "wickets": 18, "highest_score": 84, "best_bowling": "3/22"},
]

SAMPLE_MATCHES = [
    {"team1": "t1", "team2": "t2", "date": datetime(2025, 5, 1, 10, 0),
     "venue": "Delhi University Stadium", "status": "upcoming"},
    {"team1": "t3", "team2": "t4", "date": datetime(2025, 5, 2, 14, 0),
     "venue": "NSIT Cricket Ground", "status": "upcoming"},
    {"team1": "t1", "team2": "t4", "date": datetime(2025, 4, 20, 10, 0),
     "venue": "Delhi University Stadium", "status": "completed",
     "result": {"winner": "t1", "team1_score": "165/6 (20)", "team2_score": "142/8 (20)", "player_of_match": "p1"}},
    {"team1": "t2", "team2": "t3", "date": datetime(2025, 4, 18, 14, 0),
     "venue": "IIT Cricket Ground", "status": "completed",
     "result": {"winner": "t2", "team1_score": "187/4 (20)", "team2_score": "154/9 (20)", "player_of_match": "p2"}},
]

SAMPLE_TOURNAMENTS = [
    {"name": "College Premier League 2023", "start_date": date(2023, 6, 15), "end_date": date(2023, 7, 30),
     "location": "Delhi University Stadium", "status": "completed", "team_count": 8,
     "teams": ["t1", "t2", "t3", "t4"]},
    {"name": "Inter-College Cup 2024", "start_date": date(2024, 3, 10), "end_date": date(2024, 4, 25),
     "location": "Mumbai University Ground", "status": "ongoing", "team_count": 12,
     "teams": ["t1", "t3"]},
    {"name": "University Championship 2024", "start_date": date(2024, 9, 5), "end_date": date(2024, 10, 20),
     "location": "Chennai Central Stadium", "status": "upcoming", "team_count": 16,
     "teams": []},
]


class SampleDataGenerator:
    """Loads the demo data set through the store"""

    @classmethod
    def seed(cls, store: Store, created_by: str = None) -> dict:
        """
        Insert every sample record.

        Returns:
            Counts of inserted rows per table
        """
        team_rows = store.insert("teams", [
            {k: v for k, v in t.items() if k not in ("key", "captain")} | {"created_by": created_by}
            for t in SAMPLE_TEAMS
        ])
        team_ids = {t["key"]: row["id"] for t, row in zip(SAMPLE_TEAMS, team_rows)}

        player_rows = store.insert("players", [
            {k: v for k, v in p.items() if k not in ("key", "team")}
            | {"team_id": team_ids[p["team"]], "created_by": created_by}
            for p in SAMPLE_PLAYERS
        ])
        player_ids = {p["key"]: row["id"] for p, row in zip(SAMPLE_PLAYERS, player_rows)}

        for t in SAMPLE_TEAMS:
            if t["captain"]:
                store.update("teams", {"captain": player_ids[t["captain"]]}, id=team_ids[t["key"]])

        match_rows = []
        for m in SAMPLE_MATCHES:
            result = None
            if "result" in m:
                result = dict(m["result"])
                result["winner"] = team_ids[result["winner"]]
                result["player_of_match"] = player_ids[result["player_of_match"]]
            match_rows.append({
                "team1_id": team_ids[m["team1"]],
                "team2_id": team_ids[m["team2"]],
                "date": m["date"],
                "venue": m["venue"],
                "status": m["status"],
                "result": result,
                "created_by": created_by,
            })
        store.insert("matches", match_rows)

        memberships = 0
        for t in SAMPLE_TOURNAMENTS:
            row = store.insert("tournaments", [
                {k: v for k, v in t.items() if k != "teams"} | {"created_by": created_by}
            ])[0]
            if t["teams"]:
                store.insert("tournament_teams", [
                    {"tournament_id": row["id"], "team_id": team_ids[key], "created_by": created_by}
                    for key in t["teams"]
                ])
                memberships += len(t["teams"])

        return {
            "teams": len(team_rows),
            "players": len(player_rows),
            "matches": len(match_rows),
            "tournaments": len(SAMPLE_TOURNAMENTS),
            "tournament_teams": memberships,
        }
