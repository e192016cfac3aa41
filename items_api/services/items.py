"""Service helpers for item API operations."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from items_api.core.config import ApiSettings
from items_api.core.errors import NotFoundError
from items_api.core.errors import create_validation_error
from items_api.core.requests import parse_integer
from items_api.core.requests import parse_json_body
from items_api.core.validation import ValidationResult
from items_api.repository.items import ItemRepository
from items_api.schemas.item import Item
from items_api.schemas.item import ItemCreate
from items_api.schemas.item import ItemDeleted
from items_api.schemas.item import ItemUpdate
from items_api.validators.items import validate_create_request
from items_api.validators.items import validate_id_parameter
from items_api.validators.items import validate_list_query
from items_api.validators.items import validate_update_request

logger = logging.getLogger(__name__)


def _raise_if_invalid(result: ValidationResult, context: str) -> None:
    if not result.is_valid:
        logger.warning("%s: %s", context, [detail.model_dump() for detail in result.errors])
        raise create_validation_error(result.errors)


def _checked_id(item_id: Any) -> str:
    _raise_if_invalid(validate_id_parameter(item_id), "Invalid item ID")
    return item_id


def _not_found(item_id: str) -> NotFoundError:
    logger.warning("Item not found id=%s", item_id)
    return NotFoundError(f"Item with ID {item_id} not found")


def list_items_service(
    repository: ItemRepository,
    settings: ApiSettings,
    query: Mapping[str, str] | None,
) -> list[Item]:
    """Validate list query parameters and return one page of items."""
    _raise_if_invalid(validate_list_query(query), "Invalid query parameters")
    query = query or {}

    limit = parse_integer(query.get("limit"), settings.default_list_limit, 1, settings.max_list_limit)
    offset = parse_integer(query.get("offset"), 0, 0)
    status = query.get("status")

    items = repository.list(status=status, limit=limit, offset=offset)
    logger.info(
        "Listed items total=%s returned=%s limit=%s offset=%s status=%s",
        repository.count(status=status),
        len(items),
        limit,
        offset,
        status,
    )
    return items


def get_item_service(repository: ItemRepository, item_id: Any) -> Item:
    """Fetch an item or raise not found."""
    item_id = _checked_id(item_id)
    item = repository.get(item_id)
    if item is None:
        raise _not_found(item_id)
    return item


def create_item_service(repository: ItemRepository, raw_body: bytes | str | None) -> Item:
    """Parse, validate and store a new item."""
    body = parse_json_body(raw_body)
    _raise_if_invalid(validate_create_request(body), "Invalid create item request")

    payload = ItemCreate(**body)
    item = repository.insert(name=payload.name, description=payload.description)
    logger.info("Created item id=%s name=%s", item.id, item.name)
    return item


def update_item_service(repository: ItemRepository, item_id: Any, raw_body: bytes | str | None) -> Item:
    """Apply a partial update to an existing item."""
    item_id = _checked_id(item_id)
    body = parse_json_body(raw_body)
    _raise_if_invalid(validate_update_request(body), "Invalid update item request")

    payload = ItemUpdate(**body)
    item = repository.update(
        item_id,
        name=payload.name,
        description=payload.description,
        status=payload.status,
    )
    if item is None:
        raise _not_found(item_id)
    logger.info("Updated item id=%s fields=%s", item_id, sorted(payload.model_fields_set))
    return item


def delete_item_service(repository: ItemRepository, item_id: Any) -> ItemDeleted:
    """Remove an item and return its id."""
    item_id = _checked_id(item_id)
    item = repository.delete(item_id)
    if item is None:
        raise _not_found(item_id)
    logger.info("Deleted item id=%s name=%s", item_id, item.name)
    return ItemDeleted(id=item_id)
