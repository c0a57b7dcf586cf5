"""
Routers module for ServiceDesk.
"""
from . import category_router

__all__ = [
    "category_router",
]
