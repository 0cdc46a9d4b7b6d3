"""Pytest fixtures for async FastAPI testing.

Loads `.env.test` before any app module reads settings, builds a fresh
application (and therefore a fresh seeded store) per test, and provides
an httpx `AsyncClient` bound to it.
"""
import pathlib

import pytest
from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent
if (ROOT / ".env.test").exists():
    load_dotenv(dotenv_path=str(ROOT / ".env.test"))


@pytest.fixture
def store():
    """A store seeded with the three demo users."""
    from app.core.store import UserStore

    return UserStore.seeded()


@pytest.fixture
def app(store):
    from app.main import create_app

    return create_app(store=store)


@pytest.fixture
async def async_client(app):
    """Provide an httpx AsyncClient configured with the FastAPI app."""
    from httpx import ASGITransport, AsyncClient

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
