"""Integer identity and lookups shared by every collection."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..exceptions import PayloadInvalid, ResourceNotFound


# ids live in a 32-bit Integer column
MIN_ID, MAX_ID = -(2**31), 2**31 - 1


def parse_id(raw: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise PayloadInvalid("Invalid ID") from None
    if not MIN_ID <= value <= MAX_ID:
        raise PayloadInvalid("Invalid ID")
    return value


def next_id(db: Session, model) -> int:
    """Highest existing id + 1, or 1 for an empty collection.

    Read-then-write: two concurrent creates can compute the same value. The
    loser fails on the primary key at flush time.
    """
    current = db.query(func.max(model.id)).scalar()
    return (current or 0) + 1


def list_all(db: Session, model) -> list:
    return db.query(model).order_by(model.id.asc()).all()


def get_by_id(db: Session, model, doc_id: int):
    return db.query(model).filter(model.id == doc_id).first()


def require(db: Session, model, raw_id: str, label: str):
    """Parse `raw_id` and load the document, raising 400/404 errors otherwise."""
    doc = get_by_id(db, model, parse_id(raw_id))
    if doc is None:
        raise ResourceNotFound(label)
    return doc


def first(db: Session, model):
    """The document of a singleton collection, if any."""
    return db.query(model).order_by(model.id.asc()).first()


def count(db: Session, model) -> int:
    return db.query(func.count(model.id)).scalar() or 0
