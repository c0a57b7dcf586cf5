"""
Builders for the alert headers attached to entity responses.

Clients read ``X-<app>-alert`` / ``X-<app>-error`` to show a notification
and ``X-<app>-params`` for the entity it concerns.
"""
from typing import Dict
from urllib.parse import quote


def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    """Headers announcing a successful operation."""
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param, safe=""),
    }


def create_entity_creation_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    entity_id: str,
) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.created"
    else:
        message = f"A new {entity_name} is created with identifier {entity_id}"
    return create_alert(application_name, message, entity_id)


def create_entity_update_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    entity_id: str,
) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.updated"
    else:
        message = f"A {entity_name} is updated with identifier {entity_id}"
    return create_alert(application_name, message, entity_id)


def create_entity_deletion_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    entity_id: str,
) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.deleted"
    else:
        message = f"A {entity_name} is deleted with identifier {entity_id}"
    return create_alert(application_name, message, entity_id)


def create_failure_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    error_key: str,
    default_message: str,
) -> Dict[str, str]:
    """Headers describing why an entity request was rejected."""
    message = f"error.{error_key}" if enable_translation else default_message
    return {
        f"X-{application_name}-error": message,
        f"X-{application_name}-params": entity_name,
    }
