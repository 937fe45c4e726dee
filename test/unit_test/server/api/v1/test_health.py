import pytest
from httpx import AsyncClient

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client: AsyncClient):
    response = await client.get("/api/v1/version")
    assert response.status_code == 200
    assert response.json() == {"version": "0.1.0", "schema_version": "v1"}


async def test_responses_carry_process_time(client: AsyncClient):
    response = await client.get("/api/v1/health")
    assert "X-Process-Time" in response.headers
