from __future__ import annotations

from typing import Any, Dict, Optional, Type
from types import TracebackType

import httpx

from ..application.dtos import (
    CardBalanceDTO,
    PaymentRequestDTO,
    PaymentResponseDTO,
    TransactionRequestDTO,
    UserResponseDTO,
)
from ..crypto import webhook
from ..domain.entities import CardCredentials
from ..env import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings
from .http.http_client import AsyncHttpClient, HttpClient


def _default_headers(credentials: CardCredentials) -> Dict[str, str]:
    return {
        "Authorization": credentials.authorization_header,
        "Content-Type": "application/json",
    }


class SPWorldsClient:
    """Synchronous client for the SPWorlds public API.

    Every method issues exactly one request. Statuses other than 200 and 404
    raise ``SPWorldsAPIError``.
    """

    def __init__(
        self,
        card_id: str,
        card_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._credentials = CardCredentials(card_id=card_id, card_token=card_token)
        self._http = HttpClient(
            base_url,
            timeout=timeout,
            headers=_default_headers(self._credentials),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SPWorldsClient":
        return cls(
            settings.card_id,
            settings.card_token,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @property
    def credentials(self) -> CardCredentials:
        return self._credentials

    def init_payment(
        self,
        amount: int,
        redirect_url: str,
        webhook_url: Optional[str] = None,
        data: Optional[str] = None,
    ) -> str:
        """Create a payment for ``amount`` AR and return the URL to send the payer to.

        Args:
            amount: Price in AR, a positive integer.
            redirect_url: Where the payer lands after a successful payment.
            webhook_url: Where SPWorlds posts the payment notification.
            data: Any caller data echoed back in the webhook.
        """
        dto = PaymentRequestDTO(
            amount=amount,
            redirect_url=redirect_url,
            webhook_url=webhook_url,
            data=data,
        )
        resp = self._http.post("payment", json=dto.model_dump(by_alias=True))
        return PaymentResponseDTO.model_validate(resp.json()).url

    def create_transaction(self, receiver: str, amount: int, comment: str) -> None:
        """Transfer ``amount`` AR from this card to the ``receiver`` card."""
        dto = TransactionRequestDTO(receiver=receiver, amount=amount, comment=comment)
        self._http.post("transactions", json=dto.model_dump())

    def get_card_balance(self) -> int:
        """Return the card balance in AR.

        A 404 passes the transport check, but a body without ``balance`` then
        fails validation with ``pydantic.ValidationError``.
        """
        resp = self._http.get("card")
        return CardBalanceDTO.model_validate(resp.json()).balance

    def find_user(self, discord_id: str) -> Optional[str]:
        """Return the in-game nickname bound to a Discord id, or None."""
        resp = self._http.get(f"users/{discord_id}")
        if resp.status_code == 404:
            return None
        return UserResponseDTO.model_validate(resp.json()).username

    def verify_hash(self, body: Any, hash_header: Optional[str]) -> bool:
        """Check a webhook body against the value of its ``X-Body-Hash`` header."""
        return webhook.verify_hash(self._credentials.card_token, body, hash_header)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SPWorldsClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncSPWorldsClient:
    """Asynchronous client for the SPWorlds public API.

    Mirrors ``SPWorldsClient`` but uses ``AsyncHttpClient`` and async methods.
    """

    def __init__(
        self,
        card_id: str,
        card_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._credentials = CardCredentials(card_id=card_id, card_token=card_token)
        self._http = AsyncHttpClient(
            base_url,
            timeout=timeout,
            headers=_default_headers(self._credentials),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "AsyncSPWorldsClient":
        return cls(
            settings.card_id,
            settings.card_token,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @property
    def credentials(self) -> CardCredentials:
        return self._credentials

    async def init_payment(
        self,
        amount: int,
        redirect_url: str,
        webhook_url: Optional[str] = None,
        data: Optional[str] = None,
    ) -> str:
        dto = PaymentRequestDTO(
            amount=amount,
            redirect_url=redirect_url,
            webhook_url=webhook_url,
            data=data,
        )
        resp = await self._http.post("payment", json=dto.model_dump(by_alias=True))
        return PaymentResponseDTO.model_validate(resp.json()).url

    async def create_transaction(
        self, receiver: str, amount: int, comment: str
    ) -> None:
        dto = TransactionRequestDTO(receiver=receiver, amount=amount, comment=comment)
        await self._http.post("transactions", json=dto.model_dump())

    async def get_card_balance(self) -> int:
        resp = await self._http.get("card")
        return CardBalanceDTO.model_validate(resp.json()).balance

    async def find_user(self, discord_id: str) -> Optional[str]:
        resp = await self._http.get(f"users/{discord_id}")
        if resp.status_code == 404:
            return None
        return UserResponseDTO.model_validate(resp.json()).username

    def verify_hash(self, body: Any, hash_header: Optional[str]) -> bool:
        return webhook.verify_hash(self._credentials.card_token, body, hash_header)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncSPWorldsClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
