"""Pytest fixtures and configuration."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from music_library.catalog import Catalog, get_catalog
from music_library.main import app


@pytest.fixture
def catalog() -> Catalog:
    """A freshly seeded catalog for each test."""
    return Catalog.seeded()


@pytest.fixture
async def client(catalog: Catalog) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints against ``catalog``."""
    app.dependency_overrides[get_catalog] = lambda: catalog
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
