from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from hello_app.config import Settings
from hello_app.main import create_app


@pytest.fixture
def app() -> FastAPI:
    """A fresh application per test, so counter state never leaks between tests."""
    return create_app(Settings(app_name="hello-test"))


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client that drives the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
