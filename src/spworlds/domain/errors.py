"""Domain-specific exceptions."""

from __future__ import annotations


class SPWorldsAPIError(Exception):
    """Raised when the SPWorlds API answers with a status other than 200 or 404."""

    def __init__(self, status_code: int, reason_phrase: str) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(
            f"SPWorlds API request failed: {status_code} {reason_phrase}".rstrip()
        )
