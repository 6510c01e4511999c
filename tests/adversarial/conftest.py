"""
Shared fixtures for adversarial tests.

Race condition tests run against a migrated, emptied database; they are
skipped when PostgreSQL is not reachable.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool


@pytest.fixture
def pool(db_pool: ConnectionPool, clean_database: None) -> Generator[ConnectionPool, None, None]:
    """Connection pool over an empty database for each test."""
    yield db_pool
