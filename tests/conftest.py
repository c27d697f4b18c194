from typing import Any, AsyncGenerator

import httpx
import pytest

from core.dependencies import get_database
from main import app


class FakeDatabase:
    """
    Stand-in for `core.db.Database`.

    Results are queued per method and handed out in order; a queued exception
    is raised instead. Every call is recorded so tests can assert that
    nothing reached storage.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self._results: dict[str, list[Any]] = {"fetch_one": [], "fetch_all": []}

    def queue(self, method: str, *results: Any) -> "FakeDatabase":
        self._results[method].extend(results)
        return self

    def _next(self, method: str, sql: str, args: tuple[Any, ...]) -> Any:
        self.calls.append((method, sql, args))
        pending = self._results[method]
        if not pending:
            raise AssertionError(f"unexpected {method} call: {sql}")
        result = pending.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        return self._next("fetch_one", sql, args)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return self._next("fetch_all", sql, args)


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
async def api_client(fake_db: FakeDatabase) -> AsyncGenerator[httpx.AsyncClient, None]:
    app.dependency_overrides[get_database] = lambda: fake_db
    try:
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_database, None)
