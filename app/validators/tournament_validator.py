from datetime import date
from typing import Optional


class TournamentValidator:
    MIN_TEAMS = 2

    @staticmethod
    def validate(start_date: Optional[date], end_date: Optional[date], team_count: Optional[int]) -> dict:
        """
        Validate tournament dates and capacity.

        Rules:
        1. End date on or after start date
        2. Room for at least 2 teams
        """
        errors = []

        if start_date and end_date and end_date < start_date:
            errors.append(f"End date {end_date.isoformat()} is before start date {start_date.isoformat()}")

        if team_count is not None and team_count < TournamentValidator.MIN_TEAMS:
            errors.append(f"Tournament needs room for at least {TournamentValidator.MIN_TEAMS} teams, got {team_count}")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
        }
