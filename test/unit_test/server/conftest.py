from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_shop.core.models.domain.enums import Role

TEST_PASSWORD = "secret"


@pytest_asyncio.fixture
async def admin(make_user):
    return await make_user("admin@bakery.local", Role.ADMIN, first_name="Alice", last_name="Admin")


@pytest_asyncio.fixture
async def baker(make_user):
    return await make_user("baker@bakery.local", Role.BAKER, first_name="Bob", last_name="Baker")


@pytest.fixture
def admin_auth(admin):
    return ("admin@bakery.local", TEST_PASSWORD)


@pytest.fixture
def baker_auth(baker):
    return ("baker@bakery.local", TEST_PASSWORD)


@pytest_asyncio.fixture(name="client")
async def client_fixture(in_memory_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client whose requests share the in-memory test session."""
    from bakery_shop.core.database import get_session
    from bakery_shop.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield in_memory_session

    app.dependency_overrides[get_session] = get_session_override

    # ASGITransport does not run the lifespan, so startup never touches the real database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
