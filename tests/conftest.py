"""Root conftest — shared test configuration and the HTTP client fixture."""

import os

# Ensure tests never point at the docker-compose host
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017/nba")

import pytest
from httpx import ASGITransport, AsyncClient

from nba_api.config import Settings
from nba_api.main import create_app
from tests.fakes import FakeStore


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
async def client(fake_store):
    """FastAPI test client with the fake store injected (lifespan not run)."""
    app = create_app(settings=Settings(), store=fake_store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
