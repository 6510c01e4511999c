"""
PostgreSQL repository adapters - Account, profile and location storage.

This module provides the PostgreSQL implementations of the domain's
per-aggregate repository ports using psycopg3 with raw SQL.

Error translation
-----------------
Driver exceptions never leave this package. They are mapped onto the
domain's storage errors:

- unique_violation (SQLSTATE 23505)      -> AlreadyExists / AccountAlreadyExists
- foreign_key_violation (SQLSTATE 23503) -> ReferenceNotFound
- any other psycopg.Error                -> PersistenceError

Updates are partial: only fields carrying a value are written, and a
statement that matches no row raises RowsAffectedZero.
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

import psycopg
from psycopg import errors, sql
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from src.domain.exceptions import (
    AccountAlreadyExists,
    AlreadyExists,
    NotFound,
    PersistenceError,
    ReferenceNotFound,
    RowsAffectedZero,
)
from src.domain.models import UserAccount, UserLocation, UserProfile, supplied_fields

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Map psycopg exceptions raised inside the block onto domain errors."""
    try:
        yield
    except errors.UniqueViolation as exc:
        raise AlreadyExists(f"error in {operation}: {exc.diag.constraint_name}") from exc
    except errors.ForeignKeyViolation as exc:
        raise ReferenceNotFound(f"error in {operation}: {exc.diag.constraint_name}") from exc
    except psycopg.Error as exc:
        logger.error("Database error in %s: %s", operation, exc)
        raise PersistenceError(f"error in {operation}") from exc


def update_statement(table: str, changes: Mapping[str, object], extra_where: str = "") -> sql.Composed:
    """
    Build `UPDATE table SET col = %(col)s, ... WHERE id = %(id)s`.

    Column names are quoted as identifiers; values stay parameterized.
    """
    assignments = sql.SQL(", ").join(
        sql.SQL("{} = {}").format(sql.Identifier(column), sql.Placeholder(column))
        for column in changes
    )
    return sql.SQL("UPDATE {} SET {}, updated_at = NOW() WHERE id = %(id)s{}").format(
        sql.Identifier(table), assignments, sql.SQL(extra_where)
    )


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create_account(self, account: UserAccount) -> None:
        """
        Insert the account row.

        The UNIQUE constraint on phone_number decides concurrent
        registrations for the same number: exactly one insert commits.

        Raises:
            AccountAlreadyExists: phone_number (or id) already present
            PersistenceError: any other database failure
        """
        insert_sql = """
            INSERT INTO users (id, phone_number, fcm_token)
            VALUES (%s, %s, %s)
        """
        try:
            with translate_errors("create_account"):
                with self._pool.connection() as conn, conn.cursor() as cursor:
                    cursor.execute(
                        insert_sql, (account.id, account.phone_number, account.fcm_token)
                    )
                    conn.commit()
        except AlreadyExists as exc:
            raise AccountAlreadyExists(account.phone_number) from exc
        except ReferenceNotFound as exc:
            raise PersistenceError("error in create_account") from exc

    def delete_account(self, account_id: str) -> None:
        with translate_errors("delete_account"):
            with self._pool.connection() as conn:
                conn.execute("DELETE FROM users WHERE id = %s", (account_id,))
                conn.commit()


class PostgresProfileRepository:
    """Implements ProfileRepository protocol over the users table."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def get_profile(self, user_id: str) -> UserProfile:
        select_sql = """
            SELECT id, phone_number, fcm_token, first_name, last_name, image_url
            FROM users
            WHERE id = %s
        """
        with translate_errors("get_profile"):
            with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                cursor.execute(select_sql, (user_id,))
                row = cursor.fetchone()

        if row is None:
            raise NotFound(f"user {user_id} not found")
        return UserProfile(**row)

    def update_profile(self, profile: UserProfile) -> None:
        changes = supplied_fields(profile)
        if not changes:
            raise RowsAffectedZero(f"no changes supplied for user {profile.id}")

        with translate_errors("update_profile"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(update_statement("users", changes), {**changes, "id": profile.id})
                conn.commit()
                rowcount = cursor.rowcount

        if rowcount == 0:
            raise RowsAffectedZero(f"no rows affected, user {profile.id} not found")


class PostgresLocationRepository:
    """Implements LocationRepository protocol over users_locations."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def insert_location(self, location: UserLocation) -> None:
        """
        Raises:
            ReferenceNotFound: user_id does not reference an existing user
            AlreadyExists: location id collision
        """
        insert_sql = """
            INSERT INTO users_locations (id, user_id, name, address, latitude, longitude)
            VALUES (%s, %s, %s, %s, %s, %s)
        """
        with translate_errors("insert_location"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    insert_sql,
                    (
                        location.id,
                        location.user_id,
                        location.name,
                        location.address,
                        location.latitude,
                        location.longitude,
                    ),
                )
                conn.commit()
                rowcount = cursor.rowcount

        if rowcount == 0:
            raise RowsAffectedZero("error in insert_location")

    def list_locations(self, user_id: str) -> list[UserLocation]:
        select_sql = """
            SELECT id, user_id, name, address, latitude, longitude
            FROM users_locations
            WHERE user_id = %s
            ORDER BY created_at
        """
        with translate_errors("list_locations"):
            with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                cursor.execute(select_sql, (user_id,))
                rows = cursor.fetchall()
        return [UserLocation(**row) for row in rows]


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
            logger.info("Migration complete: %s", sql_file.name)
        except psycopg.Error as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
