"""Integration-test fixtures.

Each test gets its own app wired to in-memory stores and a simulated
ledger, so tests run without a database or data directory.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config.settings import Settings
from src.main import create_app
from src.services import Services, build_services


@pytest_asyncio.fixture
async def services() -> Services:
    return build_services(Settings(STORE_BACKEND="memory"))


@pytest_asyncio.fixture
async def client(services: Services) -> AsyncClient:  # type: ignore[override]
    transport = ASGITransport(app=create_app(services))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def wallet_client(client: AsyncClient) -> AsyncClient:
    """Client that identifies itself with a wallet address header."""
    client.headers.update({"x-wallet-address": "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"})
    return client
