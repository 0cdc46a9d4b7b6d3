"""Routing table tests: every route exists and unknown paths fall through."""

import pytest


@pytest.mark.parametrize(
    "method, path, expected",
    [
        ("GET", "/", 200),
        ("GET", "/api/v1/users", 200),
        ("GET", "/api/v1/users/1", 200),
        # empty body
        ("POST", "/api/v1/users", 400),
        ("PUT", "/api/v1/users/1", 400),
        ("GET", "/health", 200),
    ],
)
async def test_route_exists(async_client, method, path, expected):
    r = await async_client.request(method, path)
    assert r.status_code == expected, r.text


async def test_unknown_route_is_framework_not_found(async_client):
    r = await async_client.get("/nonexistent")
    assert r.status_code == 404
    assert "error" not in r.json()


async def test_delete_is_not_routed(async_client, store):
    r = await async_client.delete("/api/v1/users/1")
    assert r.status_code == 405
    assert len(store) == 3


async def test_health_reports_record_count(async_client):
    r = await async_client.get("/health")
    assert r.json() == {"status": "ok", "users": 3}

    await async_client.post("/api/v1/users", json={"id": "4"})
    r = await async_client.get("/health")
    assert r.json()["users"] == 4
