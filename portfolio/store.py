# portfolio/store.py
from __future__ import annotations

import logging
import math
from typing import Any

from sqlalchemy import String, cast, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from portfolio.schemas.common import Pagination

logger = logging.getLogger("portfolio.store")

# SQLSTATE 23505 = unique_violation (PostgreSQL), 1062 = ER_DUP_ENTRY (MySQL)
_UNIQUE_SQLSTATES = {"23505"}
_UNIQUE_MYSQL_CODES = {1062}
_UNIQUE_MESSAGES = ("UNIQUE constraint failed", "duplicate key value", "Duplicate entry")


class StoreError(Exception):
    pass


class UniqueConstraintViolation(StoreError):
    """Raised when a write collides with a unique index."""

    def __init__(self, message: str = "Unique constraint violated", *, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if orig is None:
        return False

    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _UNIQUE_SQLSTATES:
        return True

    args = getattr(orig, "args", ())
    if args and args[0] in _UNIQUE_MYSQL_CODES:
        return True

    text = str(orig)
    return any(marker in text for marker in _UNIQUE_MESSAGES)


def commit(db: Session, message: str = "Unique constraint violated") -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            logger.info("unique_violation", extra={"detail": str(exc.orig)})
            raise UniqueConstraintViolation(message, detail=str(exc.orig)) from exc
        raise


LIKE_ESCAPE = "\\"


def like_pattern(term: str) -> str:
    """Substring pattern with LIKE wildcards in ``term`` matched literally."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def contains_any(term: str, *columns) -> Any:
    """Case-insensitive substring match across the given columns (OR)."""
    pattern = like_pattern(term)
    clauses = []
    for column in columns:
        if not isinstance(column.type, String):
            column = cast(column, String)
        clauses.append(column.ilike(pattern, escape=LIKE_ESCAPE))
    return or_(*clauses)


def paginate(query: Query, page: int, limit: int) -> tuple[list, Pagination]:
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    total_pages = math.ceil(total / limit) if limit else 0
    return items, Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )


def upsert(db: Session, model, key: dict[str, Any], values: dict[str, Any]):
    """Update the row matching ``key`` or insert a new one; caller commits."""
    row = db.query(model).filter_by(**key).first()
    if row is None:
        row = model(**key, **values)
        db.add(row)
    else:
        for field, value in values.items():
            setattr(row, field, value)
    return row


def get_or_create_singleton(db: Session, model, key: str, defaults: dict[str, Any]):
    """Read the one-row table, inserting ``defaults`` when it is empty.

    Commits the insert. A concurrent insert surfaces as a unique violation on
    the fixed key, in which case the winner's row is returned.
    """
    row = db.get(model, key)
    if row is not None:
        return row

    db.add(model(id=key, **defaults))
    try:
        commit(db)
    except UniqueConstraintViolation:
        logger.info("singleton_create_raced", extra={"table": model.__tablename__})
    return db.get(model, key)

