"""
Schemas module for ServiceDesk.
"""
from .common import SortDirection, SortOrder, PageRequest, Page
from .category import MAX_ID, Category, CategoryPatch

__all__ = [
    # Common
    "SortDirection",
    "SortOrder",
    "PageRequest",
    "Page",
    # Category
    "MAX_ID",
    "Category",
    "CategoryPatch",
]
