"""Tests for HTTP method probe endpoints."""

import pytest
from httpx import AsyncClient

METHODS = ["GET", "OPTIONS", "TRACE", "PUT", "DELETE", "POST", "PATCH"]


@pytest.mark.parametrize("method", METHODS)
async def test_method_probe(client: AsyncClient, method: str) -> None:
    """Test each probe answers its own verb with OK."""
    response = await client.request(method, f"/api/methods/{method.lower()}")

    assert response.status_code == 200
    assert response.text == "OK"


async def test_head_probe(client: AsyncClient) -> None:
    """Test the HEAD probe answers 200."""
    response = await client.head("/api/methods/head")

    assert response.status_code == 200


async def test_probe_rejects_other_verbs(client: AsyncClient) -> None:
    """Test a probe only accepts its own verb."""
    response = await client.get("/api/methods/post")

    assert response.status_code == 405


async def test_untagged_route(client: AsyncClient) -> None:
    """Test the untagged route body."""
    response = await client.get("/api/untagged-route")

    assert response.status_code == 200
    assert response.text == "woah how did u find me im untagged"
