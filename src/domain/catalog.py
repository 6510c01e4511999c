"""
Catalog services - Xozmak listings, categories and sub-categories.

All three aggregates share one shape: create with a generated id,
list active rows, partial update, soft delete. The service logs each
call and delegates; storage errors (AlreadyExists, ReferenceNotFound,
RowsAffectedZero, PersistenceError) propagate to the caller.
"""

import logging
import uuid
from dataclasses import replace
from typing import Generic

from .models import Category, EntityState, SubCategory, Xozmak
from .ports import (
    CatalogRepository,
    CategoryRepository,
    EntityT,
    SubCategoryRepository,
    XozmakRepository,
)

logger = logging.getLogger(__name__)


class CatalogService(Generic[EntityT]):
    """CRUD orchestration for one catalog aggregate."""

    entity_name = "Entity"

    def __init__(self, repository: CatalogRepository[EntityT]) -> None:
        self.repository = repository

    def create(self, entity: EntityT) -> str:
        entity = replace(entity, id=str(uuid.uuid4()), state=EntityState.ACTIVE)
        logger.info("Create%s started: id=%s", self.entity_name, entity.id)
        self.repository.create(entity)
        logger.info("Create%s finished: id=%s", self.entity_name, entity.id)
        return entity.id

    def list_active(self) -> list[EntityT]:
        logger.info("Get%s started", self.entity_name)
        return self.repository.list_active()

    def update(self, entity_id: str, entity: EntityT) -> None:
        logger.info("Update%s started: id=%s", self.entity_name, entity_id)
        self.repository.update(replace(entity, id=entity_id))
        logger.info("Update%s finished: id=%s", self.entity_name, entity_id)

    def delete(self, entity_id: str) -> None:
        logger.info("Delete%s started: id=%s", self.entity_name, entity_id)
        self.repository.soft_delete(entity_id)
        logger.info("Delete%s finished: id=%s", self.entity_name, entity_id)


class XozmakService(CatalogService[Xozmak]):
    entity_name = "Xozmak"

    def __init__(self, repository: XozmakRepository) -> None:
        super().__init__(repository)

    def create_for(self, user_id: str, xozmak: Xozmak) -> str:
        """Create a listing owned by the calling user."""
        return self.create(replace(xozmak, created_by=user_id))


class CategoryService(CatalogService[Category]):
    entity_name = "Category"

    def __init__(self, repository: CategoryRepository) -> None:
        super().__init__(repository)


class SubCategoryService(CatalogService[SubCategory]):
    entity_name = "SubCategory"

    def __init__(self, repository: SubCategoryRepository) -> None:
        super().__init__(repository)
