"""
Typed exceptions raised by the store layer and the API routes.

Every exception carries the HTTP status code the API answers with when it
reaches the exception handler registered in main.py.
"""


class CricketConnectError(Exception):
    """Base exception for College Cricket Connect"""
    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CricketConnectError):
    """Raised when a requested record doesn't exist."""
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, self.status_code)


class DuplicateRow(CricketConnectError):
    """
    Raised when an insert violates a unique constraint.

    For tournament_teams this means the (tournament, team) pair is already
    recorded.
    """
    status_code = 409

    def __init__(self, message: str = "Row already exists"):
        super().__init__(message, self.status_code)


class StoreUnavailable(CricketConnectError):
    """Raised on transport or storage failures. Never retried automatically."""
    status_code = 503

    def __init__(self, message: str = "Data store is unavailable, please try again"):
        super().__init__(message, self.status_code)


class ConstraintViolation(CricketConnectError):
    """Raised when a write breaks a constraint other than uniqueness (e.g. unknown foreign key)."""
    status_code = 400

    def __init__(self, message: str = "Write violates a data constraint"):
        super().__init__(message, self.status_code)
