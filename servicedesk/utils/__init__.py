"""
Utilities module for ServiceDesk.
"""
from .exceptions import (
    ServiceDeskException,
    BadRequestAlertException,
    CategoryNotFoundError,
)
from .header_utils import (
    create_alert,
    create_entity_creation_alert,
    create_entity_update_alert,
    create_entity_deletion_alert,
    create_failure_alert,
)
from .pagination_utils import generate_pagination_http_headers

__all__ = [
    "ServiceDeskException",
    "BadRequestAlertException",
    "CategoryNotFoundError",
    "create_alert",
    "create_entity_creation_alert",
    "create_entity_update_alert",
    "create_entity_deletion_alert",
    "create_failure_alert",
    "generate_pagination_http_headers",
]
