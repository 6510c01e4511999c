"""Repository adapters - Database implementations."""

from .catalog import (
    PostgresCategoryRepository,
    PostgresSubCategoryRepository,
    PostgresXozmakRepository,
)
from .postgres import (
    PostgresAccountRepository,
    PostgresLocationRepository,
    PostgresProfileRepository,
    run_migrations,
)

__all__ = [
    "PostgresAccountRepository",
    "PostgresCategoryRepository",
    "PostgresLocationRepository",
    "PostgresProfileRepository",
    "PostgresSubCategoryRepository",
    "PostgresXozmakRepository",
    "run_migrations",
]
