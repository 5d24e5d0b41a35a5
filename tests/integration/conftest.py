"""Integration test fixtures: the API wired to an in-memory database."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from salary_tracker.api.app import create_app
from salary_tracker.api.dependencies import get_db_session


def salary_payload(**overrides: Any) -> dict[str, Any]:
    """JSON body for a valid POST /api/addSalary request."""
    payload: dict[str, Any] = {
        "employeeId": "EMP001",
        "employeeName": "Asha Rao",
        "month": 1,
        "year": 2024,
        "totalMonthlySalary": 5000,
        "advanceAmountPaid": 2000,
        "paymentDate": "2024-01-31T00:00:00Z",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def app(session_factory):
    """Application whose request sessions come from the test database."""
    app = create_app()

    async def _test_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _test_session
    return app


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def created(client: AsyncClient) -> dict[str, Any]:
    """A stored record for EMP001, January 2024 (5000 total, 2000 advance)."""
    response = await client.post("/api/addSalary", json=salary_payload())
    assert response.status_code == 201, response.text
    return response.json()["data"]
