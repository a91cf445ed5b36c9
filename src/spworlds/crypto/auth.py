from __future__ import annotations

import base64


def build_authorization_header(card_id: str, card_token: str) -> str:
    """Return the ``Bearer`` header value for a card id and its secret token."""
    raw = f"{card_id}:{card_token}".encode("utf-8")
    return f"Bearer {base64.b64encode(raw).decode('utf-8')}"
