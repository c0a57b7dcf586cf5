"""
Common schemas used across the application.
"""
from pydantic import BaseModel, Field
from typing import Generic, List, Optional, TypeVar
from enum import Enum
import math

T = TypeVar("T")


class SortDirection(str, Enum):
    """Sort direction of a single sort order."""
    ASC = "asc"
    DESC = "desc"


class SortOrder(BaseModel):
    """One `field,direction` entry of a sort specification."""
    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """Parse `name`, `name,asc` or `name,desc`."""
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        if len(parts) > 1 and parts[-1].lower() in ("asc", "desc"):
            return cls(field=parts[0], direction=SortDirection(parts[-1].lower()))
        return cls(field=parts[0])


class PageRequest(BaseModel):
    """Pagination information for a list request."""
    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: List[SortOrder] = Field(default_factory=list)

    @classmethod
    def of(
        cls,
        page: int = 0,
        size: int = 20,
        sort: Optional[List[str]] = None,
        default_size: int = 20,
        max_size: int = 2000,
    ) -> "PageRequest":
        """
        Build a page request from raw query values.

        Invalid values are normalised instead of rejected: a negative page
        becomes the first page, a non-positive size falls back to the
        default and sizes above the maximum are capped.
        """
        if page < 0:
            page = 0
        if size < 1:
            size = default_size
        size = min(size, max_size)
        orders = [SortOrder.parse(s) for s in (sort or []) if s.strip(", ")]
        return cls(page=page, size=size, sort=orders)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """A slice of results plus the information needed to navigate the rest."""
    content: List[T] = Field(default_factory=list)
    total_elements: int = 0
    number: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size > 0 else 1
