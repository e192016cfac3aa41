"""Item API routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Request
from fastapi import Response

from items_api.api.transport import get_api_settings
from items_api.api.transport import get_item_repository
from items_api.api.transport import to_http_response
from items_api.core.config import ApiSettings
from items_api.core.responses import build_created
from items_api.core.responses import build_options
from items_api.core.responses import build_success
from items_api.repository.items import ItemRepository
from items_api.services.items import create_item_service
from items_api.services.items import delete_item_service
from items_api.services.items import get_item_service
from items_api.services.items import list_items_service
from items_api.services.items import update_item_service

router = APIRouter(tags=["items"])


@router.get("/items")
def list_items_endpoint(
    request: Request,
    repository: ItemRepository = Depends(get_item_repository),
    settings: ApiSettings = Depends(get_api_settings),
) -> Response:
    """List items with optional status filter and pagination."""
    items = list_items_service(repository, settings, dict(request.query_params))
    return to_http_response(build_success(items, "Items retrieved successfully"))


@router.post("/items")
async def create_item_endpoint(
    request: Request,
    repository: ItemRepository = Depends(get_item_repository),
) -> Response:
    """Create an item."""
    item = create_item_service(repository, await request.body())
    return to_http_response(build_created(item, "Item created successfully"))


@router.get("/items/{item_id}")
def get_item_endpoint(
    item_id: str,
    repository: ItemRepository = Depends(get_item_repository),
) -> Response:
    """Get a single item by id."""
    item = get_item_service(repository, item_id)
    return to_http_response(build_success(item, "Item retrieved successfully"))


@router.put("/items/{item_id}")
async def update_item_endpoint(
    item_id: str,
    request: Request,
    repository: ItemRepository = Depends(get_item_repository),
) -> Response:
    """Update an item."""
    item = update_item_service(repository, item_id, await request.body())
    return to_http_response(build_success(item, "Item updated successfully"))


@router.delete("/items/{item_id}")
def delete_item_endpoint(
    item_id: str,
    repository: ItemRepository = Depends(get_item_repository),
) -> Response:
    """Delete an item."""
    deleted = delete_item_service(repository, item_id)
    return to_http_response(build_success(deleted, "Item deleted successfully"))


@router.options("/items")
@router.options("/items/{item_id}")
def preflight_endpoint() -> Response:
    """Answer CORS preflight requests."""
    return to_http_response(build_options())
