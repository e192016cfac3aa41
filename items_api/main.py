"""FastAPI application entrypoint for the items API."""

from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable
import logging
import time

from fastapi import FastAPI
from fastapi import Request
from fastapi import Response

from items_api.api.error_handlers import register_error_handlers
from items_api.api.items import router as items_router
from items_api.core.config import configure_logging
from items_api.core.config import get_settings
from items_api.repository.items import InMemoryItemRepository
from items_api.repository.items import ItemRepository

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log method, path, status and duration for each request."""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "Request completed method=%s path=%s status=%s duration_ms=%.1f",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


def create_app(repository: ItemRepository | None = None) -> FastAPI:
    """Build an application bound to ``repository`` (seeded in-memory store by default)."""
    app = FastAPI(title="Items API")
    app.state.item_repository = repository if repository is not None else InMemoryItemRepository()
    register_error_handlers(app)
    app.middleware("http")(log_requests)
    app.include_router(items_router)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint for service readiness."""
        return {"status": "ok"}

    return app


configure_logging()
logger.info("Loaded settings=%s", get_settings().safe_for_logging())
app = create_app()
