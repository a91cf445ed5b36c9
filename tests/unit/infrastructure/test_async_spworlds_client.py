"""Tests for the asynchronous SPWorlds client against a fake API."""

import asyncio

import pytest
from pydantic import ValidationError

from spworlds import AsyncSPWorldsClient, SPWorldsAPIError, compute_body_hash
from tests.fixtures import FakeSPWorldsAPI


@pytest.mark.asyncio
async def test_init_payment_sends_nulls_and_returns_url(
    async_client: AsyncSPWorldsClient, fake_api: FakeSPWorldsAPI
) -> None:
    fake_api.respond("POST", "payment", json_body={"url": "https://spworlds.ru/pay/9"})

    url = await async_client.init_payment(32, "https://example.com/ok")

    assert url == "https://spworlds.ru/pay/9"
    assert fake_api.last_json() == {
        "amount": 32,
        "redirectUrl": "https://example.com/ok",
        "webhookUrl": None,
        "data": None,
    }


@pytest.mark.asyncio
async def test_init_payment_rejects_zero_amount(
    async_client: AsyncSPWorldsClient, fake_api: FakeSPWorldsAPI
) -> None:
    with pytest.raises(ValidationError):
        await async_client.init_payment(0, "https://example.com/ok")
    assert fake_api.requests == []


@pytest.mark.asyncio
async def test_create_transaction(
    async_client: AsyncSPWorldsClient, fake_api: FakeSPWorldsAPI
) -> None:
    fake_api.respond("POST", "transactions", json_body={})

    assert await async_client.create_transaction("777", 5, "thanks") is None
    assert fake_api.last_json() == {"receiver": "777", "amount": 5, "comment": "thanks"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "receiver,amount", [("777", 0), ("777", -1), ("777", 1.5), ("777", True), ("", 5)]
)
async def test_create_transaction_rejects_invalid_input(
    async_client: AsyncSPWorldsClient,
    fake_api: FakeSPWorldsAPI,
    receiver: str,
    amount,
) -> None:
    with pytest.raises(ValidationError):
        await async_client.create_transaction(receiver, amount, "thanks")
    assert fake_api.requests == []


@pytest.mark.asyncio
async def test_get_card_balance(
    async_client: AsyncSPWorldsClient, fake_api: FakeSPWorldsAPI
) -> None:
    fake_api.respond("GET", "card", json_body={"balance": 64})

    assert await async_client.get_card_balance() == 64


@pytest.mark.asyncio
async def test_find_user_found_and_not_found(
    async_client: AsyncSPWorldsClient, fake_api: FakeSPWorldsAPI
) -> None:
    fake_api.respond("GET", "users/1", json_body={"username": "Alex"})
    fake_api.respond("GET", "users/2", status_code=404)

    assert await async_client.find_user("1") == "Alex"
    assert await async_client.find_user("2") is None


@pytest.mark.asyncio
async def test_unexpected_status_raises(
    async_client: AsyncSPWorldsClient, fake_api: FakeSPWorldsAPI
) -> None:
    fake_api.respond("GET", "card", status_code=401, json_body={})

    with pytest.raises(SPWorldsAPIError) as exc_info:
        await async_client.get_card_balance()

    assert exc_info.value.status_code == 401
    assert exc_info.value.reason_phrase == "Unauthorized"


@pytest.mark.asyncio
async def test_concurrent_calls(
    async_client: AsyncSPWorldsClient, fake_api: FakeSPWorldsAPI
) -> None:
    fake_api.respond("GET", "card", json_body={"balance": 10})
    fake_api.respond("GET", "users/1", json_body={"username": "Alex"})

    balance, username = await asyncio.gather(
        async_client.get_card_balance(), async_client.find_user("1")
    )

    assert balance == 10
    assert username == "Alex"
    assert len(fake_api.requests) == 2


def test_verify_hash_is_synchronous(card_id: str, card_token: str) -> None:
    client = AsyncSPWorldsClient(card_id, card_token)
    header = compute_body_hash(card_token, {"a": 1})

    assert client.verify_hash({"a": 1}, header) is True
    assert client.verify_hash({"a": 2}, header) is False
    asyncio.run(client.aclose())
