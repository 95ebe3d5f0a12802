"""
Store - table-level access to the persisted records.

Rows go in and come out as plain dicts keyed by column name, so callers never
hold ORM instances across calls. Nothing is cached: every call reads or
writes the database.
"""
import logging
from typing import Optional

from sqlalchemy import literal_column
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import ConstraintViolation, DuplicateRow, StoreUnavailable
from app.models import Match, Player, Team, Tournament, TournamentTeam

logger = logging.getLogger(__name__)

TABLES = {
    "teams": Team,
    "players": Player,
    "tournaments": Tournament,
    "tournament_teams": TournamentTeam,
    "matches": Match,
}


def to_row(obj) -> dict:
    """Column values of an ORM instance"""
    return {column.key: getattr(obj, column.key) for column in obj.__table__.columns}


class Store:
    """
    select / insert / update / delete by table name.

    Raises DuplicateRow when a unique constraint fires, ConstraintViolation for
    other integrity errors and StoreUnavailable for everything else the
    database reports.
    """

    def __init__(self, session: Session):
        self.session = session

    def _model(self, table: str):
        try:
            return TABLES[table]
        except KeyError:
            raise ValueError(f"Unknown table: {table}")

    def _query(self, table: str, filters: dict):
        model = self._model(table)
        query = self.session.query(model)
        for name, value in filters.items():
            column = getattr(model, name, None)
            if column is None:
                raise ValueError(f"Unknown column {table}.{name}")
            if isinstance(value, (list, tuple, set, frozenset)):
                query = query.filter(column.in_(list(value)))
            else:
                query = query.filter(column == value)
        return query

    def _fail(self, action: str, table: str, exc: Exception):
        self.session.rollback()
        if isinstance(exc, IntegrityError):
            detail = str(exc.orig)
            logger.warning("%s on %s rejected: %s", action, table, detail)
            if "UNIQUE" in detail.upper():
                raise DuplicateRow(f"Row already exists in {table}") from exc
            raise ConstraintViolation(f"Invalid reference in {table}") from exc
        logger.error("%s on %s failed: %s", action, table, exc)
        raise StoreUnavailable() from exc

    def select(self, table: str, **filters) -> list[dict]:
        """Rows matching every filter, in insertion order. List values match with IN."""
        try:
            rows = self._query(table, filters).order_by(literal_column("rowid")).all()
            return [to_row(r) for r in rows]
        except SQLAlchemyError as e:
            self._fail("select", table, e)

    def select_one(self, table: str, **filters) -> Optional[dict]:
        rows = self.select(table, **filters)
        return rows[0] if rows else None

    def insert(self, table: str, rows: list[dict]) -> list[dict]:
        """Insert all rows in one transaction - either every row is written or none is."""
        model = self._model(table)
        try:
            objs = [model(**row) for row in rows]
            self.session.add_all(objs)
            self.session.commit()
            return [to_row(o) for o in objs]
        except SQLAlchemyError as e:
            self._fail("insert", table, e)

    def update(self, table: str, values: dict, **filters) -> list[dict]:
        try:
            objs = self._query(table, filters).all()
            for obj in objs:
                for key, value in values.items():
                    setattr(obj, key, value)
            self.session.commit()
            return [to_row(o) for o in objs]
        except SQLAlchemyError as e:
            self._fail("update", table, e)

    def delete(self, table: str, **filters) -> int:
        """Delete matching rows, returning how many went"""
        if not filters:
            raise ValueError("delete requires at least one filter")
        try:
            count = self._query(table, filters).delete(synchronize_session=False)
            self.session.commit()
            return count
        except SQLAlchemyError as e:
            self._fail("delete", table, e)
