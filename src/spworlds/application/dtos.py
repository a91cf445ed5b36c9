"""Data Transfer Objects for the SPWorlds public API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentRequestDTO(BaseModel):
    """DTO for creating a payment link."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "amount": 16,
                "redirectUrl": "https://example.com/success",
                "webhookUrl": "https://example.com/webhook",
                "data": "order-42",
            }
        },
    )

    amount: int = Field(..., gt=0, strict=True)
    redirect_url: str = Field(..., alias="redirectUrl")
    webhook_url: Optional[str] = Field(None, alias="webhookUrl")
    data: Optional[str] = None

    @field_validator("webhook_url", "data", mode="before")
    @classmethod
    def coalesce_empty(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class PaymentResponseDTO(BaseModel):
    """DTO for the payment link returned by the API."""

    url: str


class TransactionRequestDTO(BaseModel):
    """DTO for transferring AR to another card."""

    receiver: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0, strict=True)
    comment: str


class CardBalanceDTO(BaseModel):
    """DTO for the card balance."""

    balance: int


class UserResponseDTO(BaseModel):
    """DTO for a user lookup; ``username`` is null for unmapped accounts."""

    username: Optional[str] = None
