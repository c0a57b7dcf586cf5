"""
Category controller with request validation.
"""
from typing import Optional
import logging

from servicedesk.repositories import CategoryRepository
from servicedesk.schemas import Category, CategoryPatch, Page, PageRequest
from servicedesk.services.category_service import CategoryService
from servicedesk.utils.exceptions import BadRequestAlertException, CategoryNotFoundError

logger = logging.getLogger(__name__)

ENTITY_NAME = "category"


class CategoryController:
    """Controller for category operations."""

    def __init__(self, category_service: CategoryService, category_repo: CategoryRepository):
        self.category_service = category_service
        self.category_repo = category_repo

    async def create_category(self, category: Category) -> Category:
        """Create a new category. The id is assigned by the store."""
        logger.debug(f"REST request to save Category : {category}")
        if category.id is not None:
            raise BadRequestAlertException(
                "A new category cannot already have an ID", ENTITY_NAME, "idexists"
            )
        return await self.category_service.save(category)

    async def update_category(self, category_id: int, category: Category) -> Category:
        """Replace an existing category."""
        logger.debug(f"REST request to update Category : {category_id}, {category}")
        await self._check_target(category_id, category.id)
        return await self.category_service.save(category)

    async def partial_update_category(self, category_id: int, patch: CategoryPatch) -> Category:
        """Overwrite the fields present in ``patch``, leaving the others untouched."""
        logger.debug(f"REST request to partial update Category partially : {category_id}, {patch}")
        await self._check_target(category_id, patch.id)

        category = await self.category_service.partial_update(patch)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def list_categories(self, page_request: PageRequest) -> Page[Category]:
        """Get a page of categories."""
        logger.debug("REST request to get a page of Categories")
        return await self.category_service.find_all(page_request)

    async def get_category(self, category_id: int) -> Category:
        """Get a category by ID."""
        logger.debug(f"REST request to get Category : {category_id}")
        category = await self.category_service.find_one(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)
        return category

    async def delete_category(self, category_id: int) -> None:
        """Delete a category. Missing categories are not reported."""
        logger.debug(f"REST request to delete Category : {category_id}")
        await self.category_service.delete(category_id)

    async def _check_target(self, path_id: int, body_id: Optional[int]) -> None:
        # Advisory for PUT: the category may still vanish before the write.
        if body_id is None:
            raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
        if body_id != path_id:
            raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")
        if not await self.category_repo.exists_by_id(path_id):
            raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")
