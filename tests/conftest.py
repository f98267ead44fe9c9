"""Integration test fixtures.

This conftest provides an HTTP client bound to the full app.
Unit tests in tests/unit/ do not need it.
"""

from typing import Any, AsyncIterator, cast

import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a dummy
    base_url so relative requests resolve.
    """
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
