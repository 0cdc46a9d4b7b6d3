"""Application factory tests: store seeding and CORS configuration."""

from httpx import ASGITransport, AsyncClient

from app.core.config import settings
from app.main import create_app


def _client(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


async def test_create_app_seeds_demo_users_by_default(monkeypatch):
    monkeypatch.setattr(settings, "SEED_DEMO_USERS", True)

    async with _client(create_app()) as client:
        r = await client.get("/api/v1/users")
    assert [u["id"] for u in r.json()] == ["1", "2", "3"]


async def test_create_app_without_seed_starts_empty(monkeypatch):
    monkeypatch.setattr(settings, "SEED_DEMO_USERS", False)

    app = create_app()
    assert len(app.state.store) == 0
    async with _client(app) as client:
        r = await client.get("/api/v1/users")
        assert r.json() == []

        r = await client.post("/api/v1/users", json={"id": "1", "fullName": "First", "emoji": "🥇"})
        assert r.status_code == 201
        r = await client.get("/api/v1/users")
    assert r.json() == [{"id": "1", "fullName": "First", "emoji": "🥇"}]


async def test_apps_do_not_share_a_store(monkeypatch):
    monkeypatch.setattr(settings, "SEED_DEMO_USERS", True)
    first, second = create_app(), create_app()

    async with _client(first) as client:
        await client.post("/api/v1/users", json={"id": "4"})
    assert len(first.state.store) == 4
    assert len(second.state.store) == 3


async def test_cors_preflight_allows_configured_origin(monkeypatch):
    monkeypatch.setattr(settings, "BACKEND_CORS_ORIGINS", "http://localhost:3000, http://example.com")

    async with _client(create_app()) as client:
        r = await client.options(
            "/api/v1/users",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3000"


async def test_cors_rejects_unlisted_origin(monkeypatch):
    monkeypatch.setattr(settings, "BACKEND_CORS_ORIGINS", "http://localhost:3000")

    async with _client(create_app()) as client:
        r = await client.options(
            "/api/v1/users",
            headers={
                "Origin": "http://evil.example",
                "Access-Control-Request-Method": "POST",
            },
        )
    assert r.status_code == 400
    assert "access-control-allow-origin" not in r.headers


async def test_cors_disabled_without_origins(monkeypatch):
    monkeypatch.setattr(settings, "BACKEND_CORS_ORIGINS", None)

    async with _client(create_app()) as client:
        r = await client.get("/api/v1/users", headers={"Origin": "http://localhost:3000"})
    assert r.status_code == 200
    assert "access-control-allow-origin" not in r.headers
