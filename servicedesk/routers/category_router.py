"""
Category API router.

Thin router that delegates to CategoryController and shapes the HTTP
response: status codes, Location, alert and pagination headers.
"""
from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from typing import Annotated, List

from servicedesk.config.settings import Settings, get_settings
from servicedesk.core.dependencies import get_category_controller, get_page_request
from servicedesk.controllers import CategoryController
from servicedesk.controllers.category_controller import ENTITY_NAME
from servicedesk.schemas import MAX_ID, Category, CategoryPatch, PageRequest
from servicedesk.utils import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    generate_pagination_http_headers,
)

MERGE_PATCH_JSON = "application/merge-patch+json"
CategoryId = Annotated[int, Path(ge=1, le=MAX_ID)]

router = APIRouter(prefix=f"{get_settings().api_prefix}/categories", tags=["Categories"])


def require_merge_patch(request: Request) -> None:
    """Reject PATCH bodies that are not sent as JSON merge-patch documents."""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != MERGE_PATCH_JSON:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Content type '{content_type}' not supported, expected '{MERGE_PATCH_JSON}'",
        )


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: Category,
    response: Response,
    controller: CategoryController = Depends(get_category_controller),
    settings: Settings = Depends(get_settings),
):
    """Create a new category."""
    result = await controller.create_category(category)
    response.headers["Location"] = f"{settings.api_prefix}/categories/{result.id}"
    response.headers.update(create_entity_creation_alert(
        settings.application_name, settings.enable_translation, ENTITY_NAME, str(result.id)
    ))
    return result


@router.put("/{category_id}", response_model=Category)
async def update_category(
    category_id: CategoryId,
    category: Category,
    response: Response,
    controller: CategoryController = Depends(get_category_controller),
    settings: Settings = Depends(get_settings),
):
    """Replace an existing category."""
    result = await controller.update_category(category_id, category)
    response.headers.update(create_entity_update_alert(
        settings.application_name, settings.enable_translation, ENTITY_NAME, str(category.id)
    ))
    return result


@router.patch(
    "/{category_id}",
    response_model=Category,
    dependencies=[Depends(require_merge_patch)],
)
async def partial_update_category(
    category_id: CategoryId,
    patch: CategoryPatch,
    response: Response,
    controller: CategoryController = Depends(get_category_controller),
    settings: Settings = Depends(get_settings),
):
    """Partially update a category; absent or null fields are ignored."""
    result = await controller.partial_update_category(category_id, patch)
    response.headers.update(create_entity_update_alert(
        settings.application_name, settings.enable_translation, ENTITY_NAME, str(patch.id)
    ))
    return result


@router.get("", response_model=List[Category])
async def list_categories(
    request: Request,
    response: Response,
    page_request: PageRequest = Depends(get_page_request),
    controller: CategoryController = Depends(get_category_controller),
):
    """List a page of categories."""
    page = await controller.list_categories(page_request)
    response.headers.update(generate_pagination_http_headers(request.url, page))
    return page.content


@router.get("/{category_id}", response_model=Category)
async def get_category(
    category_id: CategoryId,
    controller: CategoryController = Depends(get_category_controller),
):
    """Get a specific category."""
    return await controller.get_category(category_id)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_category(
    category_id: CategoryId,
    controller: CategoryController = Depends(get_category_controller),
    settings: Settings = Depends(get_settings),
):
    """Delete a category."""
    await controller.delete_category(category_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=create_entity_deletion_alert(
            settings.application_name, settings.enable_translation, ENTITY_NAME, str(category_id)
        ),
    )
