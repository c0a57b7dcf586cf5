"""
Dependency injection container and FastAPI dependency functions.
"""
from typing import List, Optional
import logging

from fastapi import Depends, Query

from servicedesk.config.settings import Settings, get_settings
from servicedesk.repositories import BaseRepository, CategoryRepository
from servicedesk.services.category_service import CategoryService
from servicedesk.controllers import CategoryController
from servicedesk.schemas import MAX_ID, PageRequest
from servicedesk.utils.exceptions import BadRequestAlertException

logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container wiring repository, service and controller."""

    def __init__(self):
        self.settings = get_settings()
        self.base_repo = BaseRepository(self.settings)

        # Repositories
        self.category_repo: Optional[CategoryRepository] = None

        # Services
        self.category_service: Optional[CategoryService] = None

        # Controllers
        self.category_controller: Optional[CategoryController] = None

    async def initialize(self) -> None:
        """Initialize all components (called at startup)."""
        logger.info("Initializing dependency container...")
        self.settings.ensure_directories()

        # Connect to database
        await self.base_repo.connect()

        # Initialize repositories
        self.category_repo = CategoryRepository(self.base_repo.db)
        self.category_repo.set_settings(self.settings)

        # Initialize services
        self.category_service = CategoryService(self.category_repo)

        # Initialize controllers
        self.category_controller = CategoryController(
            category_service=self.category_service,
            category_repo=self.category_repo,
        )

        logger.info("Dependency container initialized")

    async def shutdown(self) -> None:
        """Cleanup on shutdown."""
        logger.info("Shutting down dependency container...")
        await self.base_repo.disconnect()
        logger.info("Dependency container shutdown complete")


# Global container instance
container = Container()


# Dependency functions for FastAPI
def get_category_controller() -> CategoryController:
    """Dependency for category controller."""
    return container.category_controller


def get_page_request(
    page: int = Query(0, description="Zero-based page index"),
    size: Optional[int] = Query(None, description="Page size"),
    sort: List[str] = Query([], description="Sort criteria: property(,asc|desc)"),
    settings: Settings = Depends(get_settings),
) -> PageRequest:
    """Dependency building a PageRequest from the page/size/sort query parameters."""
    page_request = PageRequest.of(
        page=page,
        size=settings.default_page_size if size is None else size,
        sort=sort,
        default_size=settings.default_page_size,
        max_size=settings.max_page_size,
    )
    if page_request.offset > MAX_ID:
        raise BadRequestAlertException("Page out of range", "category", "pageinvalid")
    return page_request
