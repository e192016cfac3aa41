"""Contract tests for the items API endpoints."""

from __future__ import annotations

from datetime import datetime

from fastapi.testclient import TestClient


def _assert_timestamp(value: str) -> None:
    assert value.endswith("Z")
    datetime.fromisoformat(value.replace("Z", "+00:00"))


def _assert_error_envelope(payload: dict, code: str, status_code: int) -> None:
    assert payload["success"] is False
    assert payload["error"] == code
    assert isinstance(payload["message"], str) and payload["message"]
    assert payload["statusCode"] == status_code
    _assert_timestamp(payload["timestamp"])


def _assert_item_contract(payload: dict) -> None:
    assert set(payload) == {"id", "name", "description", "status", "createdAt", "updatedAt"}
    assert payload["status"] in {"active", "inactive"}
    _assert_timestamp(payload["createdAt"])
    _assert_timestamp(payload["updatedAt"])


def test_list_items_returns_seeded_page(client: TestClient) -> None:
    response = client.get("/items")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    payload = response.json()
    assert payload["success"] is True
    assert payload["message"] == "Items retrieved successfully"
    assert [item["id"] for item in payload["data"]] == ["1", "2", "3"]
    for item in payload["data"]:
        _assert_item_contract(item)


def test_list_items_filters_and_paginates(client: TestClient) -> None:
    active = client.get("/items", params={"status": "active"}).json()["data"]
    page = client.get("/items", params={"limit": "1", "offset": "1", "sort": "name"}).json()["data"]

    assert [item["id"] for item in active] == ["1", "3"]
    assert [item["id"] for item in page] == ["2"]


def test_list_items_rejects_bad_query(client: TestClient) -> None:
    response = client.get("/items", params={"limit": "200"})

    assert response.status_code == 400
    payload = response.json()
    _assert_error_envelope(payload, "VALIDATION_ERROR", 400)
    assert payload["message"] == "Validation failed: limit: Limit must be a number between 1 and 100"


def test_get_item(client: TestClient) -> None:
    response = client.get("/items/2")

    assert response.status_code == 200
    payload = response.json()
    assert payload["message"] == "Item retrieved successfully"
    assert payload["data"]["name"] == "Sample Item 2"
    _assert_item_contract(payload["data"])


def test_get_missing_item_returns_not_found(client: TestClient) -> None:
    response = client.get("/items/999")

    assert response.status_code == 404
    payload = response.json()
    _assert_error_envelope(payload, "NOT_FOUND", 404)
    assert payload["message"] == "Item with ID 999 not found"


def test_get_blank_item_id_is_rejected(client: TestClient) -> None:
    response = client.get("/items/%20")

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed: id: Item ID cannot be empty"


def test_create_item(client: TestClient) -> None:
    response = client.post("/items", json={"name": "Widget", "description": "A widget"})

    assert response.status_code == 201
    payload = response.json()
    assert payload["message"] == "Item created successfully"
    _assert_item_contract(payload["data"])
    assert payload["data"]["id"] == "4"
    assert payload["data"]["status"] == "active"

    assert client.get("/items/4").json()["data"]["name"] == "Widget"


def test_create_item_rejects_invalid_body(client: TestClient) -> None:
    response = client.post("/items", json={"name": "", "description": "ok", "extra": "x"})

    assert response.status_code == 400
    payload = response.json()
    _assert_error_envelope(payload, "VALIDATION_ERROR", 400)
    assert payload["message"] == "Validation failed: name: Name cannot be empty, extra: Unknown field: extra"


def test_create_item_requires_json_body(client: TestClient) -> None:
    missing = client.post("/items")
    malformed = client.post("/items", content=b"{not json", headers={"Content-Type": "application/json"})

    assert missing.status_code == 400
    _assert_error_envelope(missing.json(), "BAD_REQUEST", 400)
    assert missing.json()["message"] == "Request body is required"
    assert malformed.status_code == 400
    assert malformed.json()["message"] == "Invalid JSON format"


def test_update_item(client: TestClient) -> None:
    response = client.put("/items/1", json={"status": "inactive", "name": "Renamed"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["message"] == "Item updated successfully"
    assert payload["data"]["status"] == "inactive"
    assert payload["data"]["name"] == "Renamed"
    assert payload["data"]["description"] == "This is a sample item for testing"
    assert payload["data"]["updatedAt"] != payload["data"]["createdAt"]


def test_update_item_validation_and_missing(client: TestClient) -> None:
    invalid = client.put("/items/1", json={"status": "archived"})
    missing = client.put("/items/999", json={})

    assert invalid.status_code == 400
    assert invalid.json()["message"] == "Validation failed: status: status must be one of: active, inactive"
    assert missing.status_code == 404
    _assert_error_envelope(missing.json(), "NOT_FOUND", 404)


def test_delete_item(client: TestClient) -> None:
    response = client.delete("/items/3")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"id": "3"}, "message": "Item deleted successfully"}
    assert client.get("/items/3").status_code == 404
    assert client.delete("/items/3").status_code == 404


def test_preflight_returns_cors_headers_and_empty_body(client: TestClient) -> None:
    for path in ("/items", "/items/1"):
        response = client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"
        assert response.headers["access-control-max-age"] == "86400"


def test_unsupported_method_is_wrapped(client: TestClient) -> None:
    response = client.patch("/items/1", json={})

    assert response.status_code == 405
    _assert_error_envelope(response.json(), "METHOD_NOT_ALLOWED", 405)
    assert "GET" in response.headers["allow"]


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_item_rejects_deeply_nested_json(client: TestClient) -> None:
    response = client.post("/items", content=b"[" * 100000, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    _assert_error_envelope(response.json(), "BAD_REQUEST", 400)
    assert response.json()["message"] == "Invalid JSON format"


def test_list_items_rejects_non_ascii_digits(client: TestClient) -> None:
    response = client.get("/items", params={"limit": "٥"})

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed: limit: Limit must be a number between 1 and 100"
