from __future__ import annotations

import logging
from typing import Callable, Iterable

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from ..crypto.webhook import BODY_HASH_HEADER, verify_hash

logger = logging.getLogger(__name__)


class BodyHashMiddleware(BaseHTTPMiddleware):
    """Reject SPWorlds webhooks whose body hash does not verify.

    Only ``POST`` requests to one of ``paths`` are checked. The hash is
    computed over the raw request body with the card token as HMAC key and
    compared against the ``X-Body-Hash`` header. Failures answer
    ``401 {"detail": ...}``; everything else is passed through with the body
    still readable downstream.
    """

    def __init__(
        self,
        app,
        card_token: str,
        paths: Iterable[str],
        header_name: str = BODY_HASH_HEADER,
    ) -> None:
        super().__init__(app)
        if not card_token:
            raise ValueError("Card token cannot be empty")
        self._card_token = card_token
        self._paths = set(paths)
        self._header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method.upper() != "POST" or request.url.path not in self._paths:
            return await call_next(request)

        request, body = await self._buffer_request_body(request)

        hash_header = request.headers.get(self._header_name)
        if not hash_header:
            logger.warning("Webhook to %s without %s", request.url.path, self._header_name)
            return self._unauthorized(f"Missing {self._header_name} header")

        if not verify_hash(self._card_token, body, hash_header):
            logger.warning("Webhook to %s with invalid body hash", request.url.path)
            return self._unauthorized("Invalid webhook body hash")

        return await call_next(request)

    async def _buffer_request_body(self, request: Request) -> tuple[Request, bytes]:
        body: bytes = await request.body()

        async def receive() -> dict:
            return {"type": "http.request", "body": body, "more_body": False}

        return Request(request.scope, receive), body

    def _unauthorized(self, detail: str) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": detail}
        )
