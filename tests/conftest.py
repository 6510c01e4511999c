"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A token issuer with a controllable clock
- Mocked domain ports
- A PostgreSQL connection pool (skips the test when no database is reachable)
"""

from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import run_migrations
from src.adapters.tokens.jwt_issuer import JwtTokenIssuer
from src.config.settings import get_settings

SIGNING_KEY = "test-signing-key-with-at-least-32-bytes!"
FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Callable clock that tests can move forward."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_issuer(clock: FakeClock) -> JwtTokenIssuer:
    """Token issuer with 15-minute access and 7-day refresh lifetimes."""
    return JwtTokenIssuer(
        SIGNING_KEY,
        access_ttl=timedelta(minutes=15),
        refresh_ttl=timedelta(days=7),
        clock=clock,
    )


@pytest.fixture
def cache() -> Mock:
    """Verification cache mock holding no pending codes."""
    mock = Mock()
    mock.get.return_value = None
    return mock


@pytest.fixture
def accounts() -> Mock:
    return Mock()


@pytest.fixture
def sms_sender() -> Mock:
    return Mock()


@pytest.fixture(scope="session")
def db_pool() -> Generator[ConnectionPool, None, None]:
    """
    Connection pool against the configured database, migrated.

    Tests depending on it are skipped when PostgreSQL is not running.
    """
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=3.0)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL is not reachable")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(db_pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty every table before the test."""
    with db_pool.connection() as conn:
        conn.execute(
            "TRUNCATE users_locations, xozmaks, sub_category, category, users CASCADE"
        )
        conn.commit()
    yield
