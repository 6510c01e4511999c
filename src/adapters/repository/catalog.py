"""
PostgreSQL catalog repositories - Xozmaks, categories, sub-categories.

The three tables share one lifecycle: rows are created active, listed
while active, partially updated, and soft-deleted by flipping `state`
to 'inactive'. A single base class carries that lifecycle; subclasses
only name their table and columns.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from psycopg import sql
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from src.domain.exceptions import RowsAffectedZero
from src.domain.models import Category, EntityState, SubCategory, Xozmak, supplied_fields

from .postgres import translate_errors, update_statement

EntityT = TypeVar("EntityT", Xozmak, Category, SubCategory)


class PostgresCatalogRepository(Generic[EntityT]):
    """Create / list / update / soft-delete over one soft-deletable table."""

    table: str = ""
    columns: tuple[str, ...] = ()
    entity_factory: Callable[..., EntityT]

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def create(self, entity: EntityT) -> None:
        """
        Raises:
            AlreadyExists: unique constraint violated (e.g. duplicate name)
            ReferenceNotFound: foreign key points at a missing row
            RowsAffectedZero: insert reported no row written
        """
        values = {column: getattr(entity, column) for column in self.columns}
        values["state"] = EntityState(values["state"]).value
        insert_sql = sql.SQL("INSERT INTO {} ({}) VALUES ({})").format(
            sql.Identifier(self.table),
            sql.SQL(", ").join(map(sql.Identifier, self.columns)),
            sql.SQL(", ").join(map(sql.Placeholder, self.columns)),
        )
        with translate_errors(f"create {self.table}"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(insert_sql, values)
                conn.commit()
                rowcount = cursor.rowcount

        if rowcount == 0:
            raise RowsAffectedZero(f"error in create {self.table}")

    def list_active(self) -> list[EntityT]:
        select_sql = sql.SQL("SELECT {} FROM {} WHERE state = %s ORDER BY created_at").format(
            sql.SQL(", ").join(map(sql.Identifier, self.columns)),
            sql.Identifier(self.table),
        )
        with translate_errors(f"list {self.table}"):
            with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                cursor.execute(select_sql, (EntityState.ACTIVE.value,))
                rows = cursor.fetchall()

        return [self._to_entity(row) for row in rows]

    def update(self, entity: EntityT) -> None:
        """
        Write the supplied fields of an active row.

        Raises:
            RowsAffectedZero: row missing, soft-deleted, or nothing supplied
        """
        changes = supplied_fields(entity, exclude=("id", "state"))
        if not changes:
            raise RowsAffectedZero(f"no changes supplied for {self.table} {entity.id}")

        with translate_errors(f"update {self.table}"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    update_statement(self.table, changes, " AND state = %(active)s"),
                    {**changes, "id": entity.id, "active": EntityState.ACTIVE.value},
                )
                conn.commit()
                rowcount = cursor.rowcount

        if rowcount == 0:
            raise RowsAffectedZero(
                f"no rows affected, {self.table} with id {entity.id} not found or no changes made"
            )

    def soft_delete(self, entity_id: str) -> None:
        delete_sql = sql.SQL(
            "UPDATE {} SET state = %s, updated_at = NOW() WHERE id = %s AND state = %s"
        ).format(sql.Identifier(self.table))

        with translate_errors(f"delete {self.table}"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    delete_sql,
                    (EntityState.INACTIVE.value, entity_id, EntityState.ACTIVE.value),
                )
                conn.commit()
                rowcount = cursor.rowcount

        if rowcount == 0:
            raise RowsAffectedZero(
                f"no rows affected, {self.table} with id {entity_id} not found or already deleted"
            )

    def _to_entity(self, row: dict) -> EntityT:
        row["state"] = EntityState(row["state"])
        return self.entity_factory(**row)


class PostgresXozmakRepository(PostgresCatalogRepository[Xozmak]):
    table = "xozmaks"
    columns = (
        "id",
        "name",
        "description",
        "phone_number",
        "address",
        "image_url",
        "category_id",
        "created_by",
        "state",
    )
    entity_factory = Xozmak


class PostgresCategoryRepository(PostgresCatalogRepository[Category]):
    table = "category"
    columns = ("id", "name", "image_url", "state")
    entity_factory = Category


class PostgresSubCategoryRepository(PostgresCatalogRepository[SubCategory]):
    table = "sub_category"
    columns = ("id", "category_id", "name", "image_url", "state")
    entity_factory = SubCategory
