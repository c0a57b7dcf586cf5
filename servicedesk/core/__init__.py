"""
Core module for ServiceDesk application setup.
"""
from .app import create_app
from .dependencies import get_category_controller, get_page_request

__all__ = [
    "create_app",
    "get_category_controller",
    "get_page_request",
]
