from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://spworlds.ru/api/public/"
DEFAULT_TIMEOUT = 10.0


class Settings(BaseModel):
    """Typed client settings built from environment variables."""

    card_id: str
    card_token: str = Field(..., repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("card_id", "card_token")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Card id and card token cannot be empty")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError("Base URL must start with http:// or https://")
        if not parsed.netloc:
            raise ValueError("Base URL must include a host")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v


def get_settings() -> Settings:
    card_id = os.environ.get("SPWORLDS_CARD_ID")
    card_token = os.environ.get("SPWORLDS_CARD_TOKEN")
    if not (card_id and card_token):
        raise ValueError("SPWORLDS_CARD_ID and SPWORLDS_CARD_TOKEN are required")
    return Settings(
        card_id=card_id,
        card_token=card_token,
        base_url=os.environ.get("SPWORLDS_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(os.environ.get("SPWORLDS_TIMEOUT", str(DEFAULT_TIMEOUT))),
    )
