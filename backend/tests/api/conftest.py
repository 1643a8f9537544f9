"""API test fixtures — FastAPI app + httpx test client.

Invariants:
    - Every test gets a fresh app from create_app (no shared dependency overrides)
    - Settings passed explicitly: tests never depend on the process environment

Design Decisions:
    - ASGITransport with raise_app_exceptions=False so the catch-all handler's
      500 response is observable instead of the re-raised exception
"""

import pytest
from httpx import ASGITransport, AsyncClient

from questions_api.config import Settings
from questions_api.main import create_app

ALLOWED_ORIGIN = "http://localhost:63342"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        cors_origins=[ALLOWED_ORIGIN],
        cors_methods=["DELETE"],
    )


@pytest.fixture
def app(settings):
    return create_app(settings=settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
