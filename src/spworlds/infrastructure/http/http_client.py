from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type
from types import TracebackType

import httpx

from ...domain.errors import SPWorldsAPIError

logger = logging.getLogger(__name__)

# 404 is a regular "not found" answer for lookups, not a failure.
ACCEPTED_STATUS_CODES = frozenset({200, 404})


def _check_status(resp: httpx.Response) -> httpx.Response:
    if resp.status_code not in ACCEPTED_STATUS_CODES:
        logger.warning(
            "SPWorlds API %s %s answered %s %s",
            resp.request.method,
            resp.request.url,
            resp.status_code,
            resp.reason_phrase,
        )
        raise SPWorldsAPIError(resp.status_code, resp.reason_phrase)
    return resp


class HttpClient:
    """Thin synchronous HTTP client wrapper around httpx.

    - Normalizes base URLs and paths.
    - Applies default headers and a default timeout.
    - Raises ``SPWorldsAPIError`` for statuses other than 200 and 404.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            timeout=timeout, headers=headers, transport=transport
        )

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        logger.debug("GET %s", url)
        return _check_status(self._client.get(url, **kwargs))

    def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        url = self._url(path)
        logger.debug("POST %s", url)
        return _check_status(self._client.post(url, json=json, **kwargs))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncHttpClient:
    """Thin asynchronous HTTP client wrapper around httpx.AsyncClient.

    Mirrors ``HttpClient``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout, headers=headers, transport=transport
        )

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        logger.debug("GET %s", url)
        return _check_status(await self._client.get(url, **kwargs))

    async def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        url = self._url(path)
        logger.debug("POST %s", url)
        return _check_status(await self._client.post(url, json=json, **kwargs))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
