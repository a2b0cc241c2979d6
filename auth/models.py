"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). Mirrors
customers/models.py -- dataclasses own domain shape; stores and services do
the work.

Layer rule: no imports from api/ or customers/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A registered account.

    hashed_password is the bcrypt string stored in the users.password column.
    The plaintext password never reaches this class.

    id is None before the record is written to the database.
    """

    name: str
    email: str
    hashed_password: str
    id: int | None = None


@dataclass
class Registration:
    """Registration input after it leaves the HTTP layer.

    Fields are Optional because they are checked by core.validation, not by
    the request parser: a missing field must produce the same rule message as
    an empty one.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class Identity:
    """The claim set carried by a verified bearer token."""

    id: int
    name: str
    email: str
