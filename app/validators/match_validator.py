from typing import Optional


class MatchValidator:
    @staticmethod
    def validate(team1_id: str, team2_id: str, known_team_ids: set, result: Optional[dict] = None) -> dict:
        """
        Validate a match fixture.

        Rules:
        1. Both teams exist
        2. A team can't play itself
        3. A result's winner is one of the two teams
        """
        errors = []

        for team_id in (team1_id, team2_id):
            if team_id not in known_team_ids:
                errors.append(f"Team {team_id} not found")

        if team1_id == team2_id:
            errors.append("A team can't play against itself")

        winner = (result or {}).get("winner")
        if winner and winner not in (team1_id, team2_id):
            errors.append("Winner must be one of the two teams")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
        }
