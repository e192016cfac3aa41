"""Bridge between proxy responses and Starlette responses."""

from __future__ import annotations

from fastapi import Request
from fastapi import Response

from items_api.core.config import ApiSettings
from items_api.core.config import get_settings
from items_api.repository.items import ItemRepository
from items_api.schemas.envelope import ProxyResponse


def to_http_response(proxy: ProxyResponse) -> Response:
    """Render a ``ProxyResponse`` as a Starlette response."""
    return Response(content=proxy.body, status_code=proxy.status_code, headers=proxy.headers)


def get_item_repository(request: Request) -> ItemRepository:
    """Return the repository attached to the running application."""
    return request.app.state.item_repository


def get_api_settings() -> ApiSettings:
    return get_settings()
