"""
customers/store.py -- SQLAlchemy-backed persistence layer for customer records.

Uses SQLAlchemy Core (not ORM) so the Customer dataclass in customers/models.py
remains the authoritative domain representation. Swapping SQLite for MySQL or
PostgreSQL is a connection string change, not a rewrite.

Pattern: Repository + Data Mapper. CustomerStore is the repository;
_row_to_customer is the mapper. Services never touch SQL directly.

Security: all queries use bound parameters. No f-strings in SQL.

Connection scope: each public method opens exactly one connection, executes
exactly one statement, and releases the connection on every exit path. The
existence check and the write it guards are two separate calls; callers must
not assume they run in one transaction.

Usage:
    store = CustomerStore("sqlite:///customerprofile.db")
    store.insert(Customer(name="Acme", contact="0123456789", city="Pune", email="ops@acme.io"))
    customers = store.get_all()
    if store.exists_by_id(1):
        store.delete(1)
    store.close()
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, String, Table, select
from sqlalchemy.engine import Engine

from core.database import create_db_engine, store_errors
from customers.models import Customer

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_metadata = MetaData()

_customers = Table(
    "Customers",
    _metadata,
    Column("Id", Integer, primary_key=True, autoincrement=True),
    Column("Name", String(255), nullable=False),
    Column("Contact", String(20), nullable=False),
    Column("City", String(100), nullable=False),
    Column("Email", String(255), nullable=False, unique=True),
)


def _trimmed(customer: Customer) -> dict:
    return {
        "Name": (customer.name or "").strip(),
        "Contact": (customer.contact or "").strip(),
        "City": (customer.city or "").strip(),
        "Email": (customer.email or "").strip(),
    }


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class CustomerStore:
    """Repository for Customer entities."""

    def __init__(self, db_url: str) -> None:
        self.engine: Engine = create_db_engine(db_url)
        with store_errors("create customers table"):
            _metadata.create_all(self.engine)

    def get_all(self) -> list[Customer]:
        """Return every customer in id order. An empty list is a normal result."""
        with store_errors("list customers"):
            with self.engine.connect() as conn:
                rows = conn.execute(_customers.select().order_by(_customers.c.Id)).fetchall()
        return [_row_to_customer(r) for r in rows]

    def insert(self, customer: Customer) -> int:
        """Insert one customer and return the number of rows affected.

        Raises DuplicateKeyError if the email is already on file.
        """
        with store_errors("insert customer"):
            with self.engine.connect() as conn:
                result = conn.execute(_customers.insert().values(**_trimmed(customer)))
                conn.commit()
        return result.rowcount

    def exists_by_id(self, customer_id: int) -> bool:
        """Return True if a customer row with this id exists."""
        with store_errors("check customer existence"):
            with self.engine.connect() as conn:
                row = conn.execute(select(_customers.c.Id).where(_customers.c.Id == customer_id).limit(1)).fetchone()
        return row is not None

    def update(self, customer: Customer) -> int:
        """Overwrite every field of the row with customer.id. Returns rows affected.

        Raises DuplicateKeyError if the new email belongs to another customer.
        """
        with store_errors("update customer"):
            with self.engine.connect() as conn:
                result = conn.execute(
                    _customers.update().where(_customers.c.Id == customer.id).values(**_trimmed(customer))
                )
                conn.commit()
        return result.rowcount

    def delete(self, customer_id: int) -> int:
        """Delete the row with this id. Returns rows affected."""
        with store_errors("delete customer"):
            with self.engine.connect() as conn:
                result = conn.execute(_customers.delete().where(_customers.c.Id == customer_id))
                conn.commit()
        return result.rowcount

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mapper (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_customer(row) -> Customer:
    return Customer(
        id=row.Id,
        name=row.Name or "",
        contact=row.Contact or "",
        city=row.City or "",
        email=row.Email or "",
    )
