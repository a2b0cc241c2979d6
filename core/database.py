"""
core/database.py -- Engine construction and error translation shared by the stores.

Every store method follows the same shape:

    with store_errors("insert customer"):
        with self.engine.connect() as conn:
            result = conn.execute(<one bound-parameter statement>)
            conn.commit()

engine.connect() is the connection scope: the connection goes back to the
pool when the block exits, whether it returns normally or raises. SQLAlchemy's
pool keeps the underlying DBAPI connection open for reuse by the next call.

store_errors() turns driver failures into the core taxonomy:
  - a UNIQUE violation becomes DuplicateKeyError
  - any other SQLAlchemyError is logged and re-raised as ApplicationError

Security: all store queries use bound parameters. No f-strings in SQL.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.errors import ApplicationError, DuplicateKeyError

logger = logging.getLogger("customerprofile.db")

# Driver message fragments that identify a uniqueness violation:
# SQLite "UNIQUE constraint failed", MySQL 1062 "Duplicate entry",
# PostgreSQL "duplicate key value violates unique constraint".
_UNIQUE_MARKERS = ("unique constraint", "duplicate entry", "duplicate key")


def _set_wal_mode(dbapi_conn, connection_record) -> None:
    """Enable WAL journal mode for concurrent read safety.

    Set per-connection because SQLite PRAGMAs are not inherited by new
    connections from the pool.
    """
    dbapi_conn.execute("PRAGMA journal_mode=WAL")


def create_db_engine(db_url: str) -> Engine:
    """Build an Engine for db_url. SQLite gets thread sharing and WAL mode."""
    connect_args: dict = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(db_url, connect_args=connect_args)
    if db_url.startswith("sqlite"):
        event.listen(engine, "connect", _set_wal_mode)
    return engine


def is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return any(marker in message for marker in _UNIQUE_MARKERS)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Translate SQLAlchemy failures raised inside the block.

    action is a short phrase ("insert user") used in the log line only.
    """
    try:
        yield
    except IntegrityError as exc:
        if is_unique_violation(exc):
            raise DuplicateKeyError(action) from exc
        logger.error("Integrity error during %s: %s", action, exc.orig)
        raise ApplicationError("Database error occurred.") from exc
    except SQLAlchemyError as exc:
        logger.error("Database error during %s: %s", action, exc)
        raise ApplicationError("Database error occurred.") from exc


def ping(engine: Engine) -> bool:
    """Return True if a trivial query succeeds. Used by the health endpoint."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.warning("Database ping failed", exc_info=True)
        return False
