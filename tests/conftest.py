"""
tests/conftest.py -- Shared test fixtures for Customer Profile Service tests.

This module provides:
  - _make_test_stores(): creates isolated in-memory DBs for users + customers
  - _patch_lifespan(): wires test stores into app.state, bypassing real startup
  - api_client: module-scoped TestClient with a registered user and bearer token
  - fresh_client: function-scoped TestClient on an empty database
  - user_store / customer_store: plain in-memory stores for unit tests

Design: Named shared-memory SQLite URIs (not plain :memory:) are required
because TestClient runs sync route handlers in a thread pool. Plain :memory:
DBs are per-connection and would present a blank schema to each worker thread.
The named URI format (file:name?mode=memory&cache=shared&uri=true) shares one
in-memory instance across all connections in the same process.

The DEBUG env var must be set before any auth module import so get_settings()
auto-generates SECRET_KEY in dev mode rather than raising ValueError.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Generator
from contextlib import asynccontextmanager
from dataclasses import dataclass

# CRITICAL: Set DEBUG before any auth/core import so get_settings() can
# auto-generate SECRET_KEY in dev mode instead of raising ValueError.
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.store import UserStore
from auth.tokens import create_access_token, hash_password
from customers.store import CustomerStore

TEST_USER_NAME = "Test Admin"
TEST_USER_EMAIL = "testadmin@acme.io"
TEST_USER_PASSWORD = "testpass123"


@dataclass
class ApiHarness:
    client: TestClient
    token: str
    user_id: int
    user_store: UserStore
    customer_store: CustomerStore
    email: str = TEST_USER_EMAIL
    password: str = TEST_USER_PASSWORD

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


# ---------------------------------------------------------------------------
# Store helpers
# ---------------------------------------------------------------------------


def _make_test_stores(db_suffix: str) -> tuple[UserStore, CustomerStore]:
    """Create one named shared-memory SQLite database and open both stores on it.

    Args:
        db_suffix: Unique string appended to the DB name so test modules
                   don't share state.
    """
    url = f"sqlite:///file:test_cps_{db_suffix}?mode=memory&cache=shared&uri=true"
    return UserStore(url), CustomerStore(url)


def _patch_lifespan(user_store: UserStore, customer_store: CustomerStore):
    """Return an async context manager that replaces the real lifespan."""

    @asynccontextmanager
    async def test_lifespan(app):
        # A function-scoped client may start while a module-scoped one is
        # running; put the outer stores back when the inner client exits.
        previous = {name: getattr(app.state, name, None) for name in ("user_store", "customer_store")}
        app.state.user_store = user_store
        app.state.customer_store = customer_store
        yield
        for name, store in previous.items():
            setattr(app.state, name, store)

    return test_lifespan


def _start_harness(db_suffix: str) -> Generator[ApiHarness, None, None]:
    user_store, customer_store = _make_test_stores(db_suffix)
    user_store.insert_user(TEST_USER_NAME, TEST_USER_EMAIL, hash_password(TEST_USER_PASSWORD))
    user = user_store.find_by_email(TEST_USER_EMAIL)
    token = create_access_token(user_id=user.id, name=user.name, email=user.email)

    app.router.lifespan_context = _patch_lifespan(user_store, customer_store)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield ApiHarness(client, token, user.id, user_store, customer_store)

    customer_store.close()
    user_store.close()


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def api_client() -> Generator[ApiHarness, None, None]:
    """Yield an ApiHarness shared by one test module.

    A user (TEST_USER_EMAIL / TEST_USER_PASSWORD) is registered before the
    client starts and a bearer token is issued for it.
    """
    yield from _start_harness(f"module_{uuid.uuid4().hex}")


@pytest.fixture
def fresh_client() -> Generator[ApiHarness, None, None]:
    """Yield an ApiHarness on a database with no customers."""
    yield from _start_harness(f"fn_{uuid.uuid4().hex}")


# ---------------------------------------------------------------------------
# Unit-test store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def user_store() -> Generator[UserStore, None, None]:
    store = UserStore("sqlite:///:memory:")
    yield store
    store.close()


@pytest.fixture
def customer_store() -> Generator[CustomerStore, None, None]:
    store = CustomerStore("sqlite:///:memory:")
    yield store
    store.close()
