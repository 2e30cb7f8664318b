"""Integration test fixtures with an in-process application."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from salary_engine.api.app import create_app
from salary_engine.config import get_settings


@pytest.fixture
def app() -> FastAPI:
    """Fresh application, so every test starts with an empty ledger."""
    return create_app(get_settings())


@pytest_asyncio.fixture(scope="function")
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Get async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def add_employee(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """POST an employee to the ledger and return the created entry."""

    async def _add(**fields: Any) -> dict[str, Any]:
        response = await client.post("/api/v1/ledger", json=fields)
        assert response.status_code == 201, response.text
        return response.json()

    return _add
