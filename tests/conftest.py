"""Pytest configuration and fixtures for testing."""
import os
import tempfile
from typing import Any, Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="servicedesk-logs-")
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["APPLICATION_NAME"] = "servicedeskApp"
os.environ["MONGODB_DATABASE"] = "servicedesk_test"

from servicedesk.controllers import CategoryController
from servicedesk.core import create_app, get_category_controller
from servicedesk.repositories.category_repository import SORTABLE_FIELDS
from servicedesk.schemas import Category, Page, PageRequest, SortDirection
from servicedesk.services.category_service import CategoryService
from servicedesk.utils.exceptions import BadRequestAlertException


class InMemoryCategoryRepository:
    """Stand-in for CategoryRepository keeping categories in a dict."""

    def __init__(self):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.seq = 0

    async def exists_by_id(self, category_id: int) -> bool:
        return category_id in self.rows

    async def insert(self, category: Category) -> Category:
        self.seq += 1
        self.rows[self.seq] = category.model_dump(exclude={"id"})
        return category.model_copy(update={"id": self.seq})

    async def replace(self, category: Category) -> Category:
        self.rows[category.id] = category.model_dump(exclude={"id"})
        return category

    async def update_fields(self, category_id: int, fields: Dict[str, Any]) -> Optional[Category]:
        if category_id not in self.rows:
            return None
        self.rows[category_id].update(fields)
        return await self.find_by_id(category_id)

    async def find_by_id(self, category_id: int) -> Optional[Category]:
        row = self.rows.get(category_id)
        if row is None:
            return None
        return Category(id=category_id, **row)

    async def find_page(self, page_request: PageRequest) -> Page[Category]:
        categories: List[Category] = [Category(id=k, **v) for k, v in self.rows.items()]
        for order in reversed(page_request.sort):
            if order.field not in SORTABLE_FIELDS:
                raise BadRequestAlertException(
                    f"Invalid sort property: {order.field}", "category", "sortinvalid"
                )
            categories.sort(
                key=lambda c: getattr(c, order.field) or "",
                reverse=order.direction == SortDirection.DESC,
            )
        start = page_request.offset
        return Page[Category](
            content=categories[start:start + page_request.size],
            total_elements=len(categories),
            number=page_request.page,
            size=page_request.size,
        )

    async def delete_by_id(self, category_id: int) -> None:
        self.rows.pop(category_id, None)


@pytest.fixture
def category_store() -> InMemoryCategoryRepository:
    """Empty in-memory category store."""
    return InMemoryCategoryRepository()


@pytest.fixture
def category_service(category_store) -> CategoryService:
    return CategoryService(category_store)


@pytest.fixture
def category_controller(category_service, category_store) -> CategoryController:
    return CategoryController(category_service=category_service, category_repo=category_store)


@pytest.fixture
def api_client(category_controller) -> Generator[TestClient, None, None]:
    """Test client whose category controller is backed by the in-memory store."""
    app = create_app()
    app.dependency_overrides[get_category_controller] = lambda: category_controller
    # No context manager: the lifespan (MongoDB connection) is not started.
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_store(category_store) -> InMemoryCategoryRepository:
    """Store holding three categories with ids 1..3."""
    for name in ("Hardware", "Network", "Software"):
        category_store.seq += 1
        category_store.rows[category_store.seq] = {"name": name, "description": f"{name} issues"}
    return category_store


@pytest.fixture
def sample_category_data():
    """Sample category data."""
    return {
        "name": "Hardware",
        "description": "Laptops, monitors and peripherals"
    }
