"""
Controllers module for ServiceDesk.
"""
from .category_controller import CategoryController

__all__ = [
    "CategoryController",
]
