"""
Category repository for database operations.
"""
from typing import Any, Dict, List, Optional, Tuple
import logging

from pymongo import ASCENDING, DESCENDING, ReturnDocument

from servicedesk.schemas import Category, Page, PageRequest, SortDirection
from servicedesk.utils.exceptions import BadRequestAlertException

logger = logging.getLogger(__name__)

ENTITY_NAME = "category"

# API property -> document field
SORTABLE_FIELDS = {
    "id": "_id",
    "name": "name",
    "description": "description",
}


def _to_category(doc: Dict[str, Any]) -> Category:
    doc["id"] = doc.pop("_id")
    return Category(**doc)


class CategoryRepository:
    """Repository for category CRUD operations."""

    def __init__(self, db):
        self.db = db
        self.settings = None

    def set_settings(self, settings):
        self.settings = settings

    @property
    def collection(self):
        return self.db[self.settings.categories_collection]

    @property
    def counters(self):
        return self.db[self.settings.counters_collection]

    async def next_id(self) -> int:
        """Reserve the next identifier from the category sequence."""
        counter = await self.counters.find_one_and_update(
            {"_id": self.settings.categories_collection},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    async def exists_by_id(self, category_id: int) -> bool:
        """Check whether a category with this id is stored."""
        return await self.collection.count_documents({"_id": category_id}, limit=1) > 0

    async def insert(self, category: Category) -> Category:
        """Store a new category under a freshly assigned id."""
        category_id = await self.next_id()
        await self.collection.insert_one({
            "_id": category_id,
            **category.model_dump(exclude={"id"})
        })
        logger.info(f"Created category: {category_id} - {category.name}")
        return category.model_copy(update={"id": category_id})

    async def replace(self, category: Category) -> Category:
        """Replace every field of the category, creating it if it is gone."""
        await self.collection.replace_one(
            {"_id": category.id},
            category.model_dump(exclude={"id"}),
            upsert=True,
        )
        logger.info(f"Replaced category: {category.id}")
        return category

    async def update_fields(self, category_id: int, fields: Dict[str, Any]) -> Optional[Category]:
        """
        Overwrite only ``fields`` of a stored category.

        The lookup and the write are a single atomic operation, so a category
        deleted concurrently yields None instead of being recreated.
        """
        if not fields:
            return await self.find_by_id(category_id)

        doc = await self.collection.find_one_and_update(
            {"_id": category_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None

        logger.info(f"Updated category: {category_id} ({', '.join(sorted(fields))})")
        return _to_category(doc)

    async def find_by_id(self, category_id: int) -> Optional[Category]:
        """Get a category by ID."""
        doc = await self.collection.find_one({"_id": category_id})
        if doc:
            return _to_category(doc)
        return None

    async def find_page(self, page_request: PageRequest) -> Page[Category]:
        """Get one page of categories in the requested order."""
        sort = self._sort_spec(page_request)
        total = await self.collection.count_documents({})

        cursor = self.collection.find().sort(sort).skip(page_request.offset).limit(page_request.size)

        categories = []
        async for doc in cursor:
            categories.append(_to_category(doc))

        return Page[Category](
            content=categories,
            total_elements=total,
            number=page_request.page,
            size=page_request.size,
        )

    async def delete_by_id(self, category_id: int) -> None:
        """Delete a category. Deleting a missing category is not an error."""
        result = await self.collection.delete_one({"_id": category_id})
        if result.deleted_count > 0:
            logger.info(f"Deleted category: {category_id}")

    @staticmethod
    def _sort_spec(page_request: PageRequest) -> List[Tuple[str, int]]:
        spec = []
        for order in page_request.sort:
            field = SORTABLE_FIELDS.get(order.field)
            if field is None:
                raise BadRequestAlertException(
                    f"Invalid sort property: {order.field}", ENTITY_NAME, "sortinvalid"
                )
            spec.append((field, DESCENDING if order.direction == SortDirection.DESC else ASCENDING))
        # _id breaks ties so pages never overlap
        if all(field != "_id" for field, _ in spec):
            spec.append(("_id", ASCENDING))
        return spec
