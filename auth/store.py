"""
auth/store.py -- SQLAlchemy Core persistence layer for registered users.

Pattern: Repository + Data Mapper (same as customers/store.py).
UserStore is the repository; _row_to_user is the mapper.
Services and routes never touch SQL directly.

Security:
  All queries use bound parameters. No f-strings in SQL.
  UNIQUE(email) is enforced by the database; a collision surfaces as
  DuplicateKeyError via core.database.store_errors().

Connection scope: every method opens one connection with engine.connect(),
runs one statement, and hands the connection back to the pool on exit.

Layer rule: no imports from api/ or customers/.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, String, Table, Text
from sqlalchemy.engine import Engine

from auth.models import User
from core.database import create_db_engine, store_errors

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_metadata = MetaData()

_users = Table(
    "Users",
    _metadata,
    Column("Id", Integer, primary_key=True, autoincrement=True),
    Column("Name", String(255), nullable=False),
    Column("Email", String(255), nullable=False, unique=True),
    Column("Password", Text, nullable=False),  # bcrypt hash, never plaintext
)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class UserStore:
    """Repository for User entities.

    Usage:
        store = UserStore("sqlite:///customerprofile.db")
        store.insert_user("Ann", "ann@x.com", hash_password("secret1"))
        user = store.find_by_email("ann@x.com")
        store.close()
    """

    def __init__(self, db_url: str) -> None:
        self.engine: Engine = create_db_engine(db_url)
        with store_errors("create users table"):
            _metadata.create_all(self.engine)

    def insert_user(self, name: str, email: str, hashed_password: str) -> int:
        """Insert one user and return the number of rows affected.

        Raises DuplicateKeyError if the email is already registered.
        """
        with store_errors("insert user"):
            with self.engine.connect() as conn:
                result = conn.execute(
                    _users.insert().values(
                        Name=name.strip(),
                        Email=email.strip(),
                        Password=hashed_password,
                    )
                )
                conn.commit()
        return result.rowcount

    def find_by_email(self, email: str) -> User | None:
        """Look up a user by exact email. Returns None if not found."""
        with store_errors("find user by email"):
            with self.engine.connect() as conn:
                row = conn.execute(_users.select().where(_users.c.Email == email.strip())).fetchone()
        return _row_to_user(row) if row is not None else None

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mapper (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_user(row) -> User:
    return User(
        id=row.Id,
        name=row.Name or "",
        email=row.Email or "",
        hashed_password=row.Password or "",
    )
