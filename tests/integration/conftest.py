import os
from typing import AsyncGenerator

import httpx
import pytest
from asgi_lifespan import LifespanManager

from main import app
from seed import seed

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "").strip()


@pytest.fixture
async def db_client(monkeypatch) -> AsyncGenerator[httpx.AsyncClient, None]:
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL is not set")
    monkeypatch.setenv("DATABASE_URL", TEST_DATABASE_URL)
    async with LifespanManager(app):
        async with app.state.database.pool.acquire() as conn:
            await seed(conn)
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://test",
        ) as client:
            yield client
