"""
Repositories module for ServiceDesk.
"""
from .base import BaseRepository
from .category_repository import CategoryRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
]
