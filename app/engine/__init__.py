from app.engine.roster import RosterReconciler, RosterError, RosterOutcome, RosterQuery
from app.engine import ranking

__all__ = ["RosterReconciler", "RosterError", "RosterOutcome", "RosterQuery", "ranking"]
