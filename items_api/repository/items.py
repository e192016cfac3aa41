"""Repository primitives for item entities."""

from __future__ import annotations

from collections.abc import Iterable
import threading
from typing import Protocol

from items_api.schemas.envelope import utc_timestamp
from items_api.schemas.item import Item
from items_api.schemas.item import ItemStatus

SEED_ITEMS: tuple[Item, ...] = (
    Item(
        id="1",
        name="Sample Item 1",
        description="This is a sample item for testing",
        status="active",
        created_at="2024-01-01T00:00:00.000Z",
        updated_at="2024-01-01T00:00:00.000Z",
    ),
    Item(
        id="2",
        name="Sample Item 2",
        description="Another sample item",
        status="inactive",
        created_at="2024-01-02T00:00:00.000Z",
        updated_at="2024-01-02T00:00:00.000Z",
    ),
    Item(
        id="3",
        name="Sample Item 3",
        description="Third sample item",
        status="active",
        created_at="2024-01-03T00:00:00.000Z",
        updated_at="2024-01-03T00:00:00.000Z",
    ),
)


class ItemRepository(Protocol):
    """Storage capability required by the item service."""

    def get(self, item_id: str) -> Item | None: ...

    def list(self, *, status: ItemStatus | None = None, limit: int = 10, offset: int = 0) -> list[Item]: ...

    def count(self, *, status: ItemStatus | None = None) -> int: ...

    def insert(self, *, name: str, description: str) -> Item: ...

    def update(
        self,
        item_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        status: ItemStatus | None = None,
    ) -> Item | None: ...

    def delete(self, item_id: str) -> Item | None: ...


class InMemoryItemRepository:
    """Insertion-ordered item store held in process memory.

    Sync routes run in the threadpool while async routes run on the event loop,
    so every access goes through one lock.
    """

    def __init__(self, items: Iterable[Item] = SEED_ITEMS) -> None:
        self._items: dict[str, Item] = {item.id: item for item in items}
        self._lock = threading.Lock()

    def get(self, item_id: str) -> Item | None:
        """Fetch an item by id."""
        with self._lock:
            return self._items.get(item_id)

    def list(self, *, status: ItemStatus | None = None, limit: int = 10, offset: int = 0) -> list[Item]:
        """List items with optional status filtering and offset pagination."""
        with self._lock:
            items = self._filtered(status)
        return items[offset : offset + limit]

    def count(self, *, status: ItemStatus | None = None) -> int:
        with self._lock:
            return len(self._filtered(status))

    def insert(self, *, name: str, description: str) -> Item:
        """Create and return an active item with the next numeric id."""
        now = utc_timestamp()
        with self._lock:
            item = Item(
                id=self._next_id(),
                name=name,
                description=description,
                status="active",
                created_at=now,
                updated_at=now,
            )
            self._items[item.id] = item
        return item

    def update(
        self,
        item_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        status: ItemStatus | None = None,
    ) -> Item | None:
        """Apply the given fields to an existing item; None when it is missing."""
        changes: dict[str, str] = {"updated_at": utc_timestamp()}
        if name is not None:
            changes["name"] = name
        if description is not None:
            changes["description"] = description
        if status is not None:
            changes["status"] = status
        with self._lock:
            existing = self._items.get(item_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=changes)
            self._items[item_id] = updated
        return updated

    def delete(self, item_id: str) -> Item | None:
        """Remove an item, returning it; None when it is missing."""
        with self._lock:
            return self._items.pop(item_id, None)

    def _filtered(self, status: ItemStatus | None) -> list[Item]:
        items = list(self._items.values())
        if status is not None:
            items = [item for item in items if item.status == status]
        return items

    def _next_id(self) -> str:
        numeric_ids = [int(item_id) for item_id in self._items if item_id.isascii() and item_id.isdigit()]
        return str(max(numeric_ids, default=0) + 1)
