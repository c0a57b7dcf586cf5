"""
Service layer for categories.
"""
from typing import Optional
import logging

from servicedesk.repositories import CategoryRepository
from servicedesk.schemas import Category, CategoryPatch, Page, PageRequest

logger = logging.getLogger(__name__)


class CategoryService:
    """Business operations on categories, backed by a CategoryRepository."""

    def __init__(self, category_repo: CategoryRepository):
        self.category_repo = category_repo

    async def save(self, category: Category) -> Category:
        """Insert a new category, or fully replace an existing one."""
        logger.debug(f"Request to save Category : {category}")
        if category.id is None:
            return await self.category_repo.insert(category)
        return await self.category_repo.replace(category)

    async def partial_update(self, patch: CategoryPatch) -> Optional[Category]:
        """Merge the set fields of ``patch`` into the stored category, if it still exists."""
        logger.debug(f"Request to partially update Category : {patch}")
        return await self.category_repo.update_fields(patch.id, patch.changed_fields())

    async def find_all(self, page_request: PageRequest) -> Page[Category]:
        logger.debug(f"Request to get all Categories : {page_request}")
        return await self.category_repo.find_page(page_request)

    async def find_one(self, category_id: int) -> Optional[Category]:
        logger.debug(f"Request to get Category : {category_id}")
        return await self.category_repo.find_by_id(category_id)

    async def delete(self, category_id: int) -> None:
        logger.debug(f"Request to delete Category : {category_id}")
        await self.category_repo.delete_by_id(category_id)
