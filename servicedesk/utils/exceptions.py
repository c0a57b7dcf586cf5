"""
Custom exceptions for the ServiceDesk application.
"""


class ServiceDeskException(Exception):
    """Base exception for ServiceDesk."""
    pass


class BadRequestAlertException(ServiceDeskException):
    """
    Raised when client-supplied data violates a request invariant.

    Rendered as a 400 response carrying failure alert headers built from
    ``entity_name`` and ``error_key``.
    """
    def __init__(self, message: str, entity_name: str = "category", error_key: str = "badrequest"):
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(message)


class CategoryNotFoundError(ServiceDeskException):
    """Raised when a category is not found."""
    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")
