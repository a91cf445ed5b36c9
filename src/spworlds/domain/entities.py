from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..crypto.auth import build_authorization_header


class CardCredentials(BaseModel):
    """Card id and secret token pair identifying an SPWorlds card."""

    model_config = ConfigDict(frozen=True)

    card_id: str = Field(..., min_length=1)
    card_token: str = Field(..., min_length=1, repr=False)

    @property
    def authorization_header(self) -> str:
        return build_authorization_header(self.card_id, self.card_token)
