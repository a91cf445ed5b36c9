"""Shared pytest fixtures for SPWorlds client tests."""

from __future__ import annotations

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from spworlds import AsyncSPWorldsClient, SPWorldsClient
from tests.fixtures import FakeSPWorldsAPI


@pytest.fixture
def card_id() -> str:
    return "3fa85f64-5717-4562-b3fc-2c963f66afa6"


@pytest.fixture
def card_token() -> str:
    return "u6Vq3tPzX0m8rJfKbW1sYc2dLh9NnE4a"


@pytest.fixture
def fake_api() -> FakeSPWorldsAPI:
    return FakeSPWorldsAPI()


@pytest.fixture
def client(
    card_id: str, card_token: str, fake_api: FakeSPWorldsAPI
) -> Generator[SPWorldsClient, None, None]:
    """Synchronous client wired to the fake API."""
    with SPWorldsClient(card_id, card_token, transport=fake_api.transport) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(
    card_id: str, card_token: str, fake_api: FakeSPWorldsAPI
) -> AsyncGenerator[AsyncSPWorldsClient, None]:
    """Asynchronous client wired to the fake API."""
    async with AsyncSPWorldsClient(
        card_id, card_token, transport=fake_api.transport
    ) as c:
        yield c
