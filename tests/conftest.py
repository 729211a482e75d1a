from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from fixture_app.main import app


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an HTTPX async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
