"""
Shared route dependencies
"""
from typing import Optional
from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import NotFoundError
from app.store import Store


def get_store(db: Session = Depends(get_db)) -> Store:
    return Store(db)


def require_row(store: Store, table: str, row_id: str, label: str) -> dict:
    """Fetch one row by id or raise NotFoundError"""
    row: Optional[dict] = store.select_one(table, id=row_id)
    if row is None:
        raise NotFoundError(f"{label} not found")
    return row


def changes(update) -> dict:
    """Fields explicitly set on an update payload, enums flattened to their values"""
    values = update.model_dump(exclude_unset=True)
    for key, value in values.items():
        if hasattr(value, "value"):
            values[key] = value.value
    return values
