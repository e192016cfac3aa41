"""Unit tests for the in-memory item repository."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from items_api.repository.items import InMemoryItemRepository


def test_seeded_repository_lists_in_insertion_order() -> None:
    repository = InMemoryItemRepository()

    assert [item.id for item in repository.list()] == ["1", "2", "3"]
    assert repository.count() == 3


def test_list_filters_by_status_and_paginates() -> None:
    repository = InMemoryItemRepository()

    assert [item.id for item in repository.list(status="active")] == ["1", "3"]
    assert [item.id for item in repository.list(limit=1, offset=1)] == ["2"]
    assert repository.list(offset=10) == []
    assert repository.count(status="inactive") == 1


def test_insert_assigns_next_numeric_id_after_deletes() -> None:
    repository = InMemoryItemRepository()
    repository.delete("2")

    item = repository.insert(name="New", description="Fresh")

    assert item.id == "4"
    assert item.status == "active"
    assert item.created_at == item.updated_at
    assert repository.get("4") == item


def test_update_applies_only_given_fields() -> None:
    repository = InMemoryItemRepository()
    original = repository.get("1")

    updated = repository.update("1", status="inactive")

    assert updated is not None
    assert updated.status == "inactive"
    assert updated.name == original.name
    assert updated.created_at == original.created_at
    assert updated.updated_at != original.updated_at
    assert repository.get("1") == updated


def test_missing_items_return_none() -> None:
    repository = InMemoryItemRepository(items=())

    assert repository.get("1") is None
    assert repository.update("1", name="x") is None
    assert repository.delete("1") is None
    assert repository.insert(name="a", description="b").id == "1"


def test_concurrent_inserts_deletes_and_listing_do_not_race() -> None:
    repository = InMemoryItemRepository(items=())
    created: list[str] = []

    def insert_many() -> None:
        for index in range(200):
            created.append(repository.insert(name=f"n{index}", description="d").id)

    def delete_many() -> None:
        for index in range(1, 201):
            repository.delete(str(index))
            repository.list(limit=100)

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [pool.submit(insert_many), pool.submit(insert_many), pool.submit(delete_many)]
        for future in futures:
            future.result()

    assert len(created) == 400
    assert 0 <= repository.count() <= 400
