"""HMAC-SHA256 body hashes used by SPWorlds webhooks (``X-Body-Hash``)."""

from __future__ import annotations

import base64
import json
import math
from typing import Any, Optional

from cryptography.hazmat.primitives import constant_time, hashes, hmac

BODY_HASH_HEADER = "X-Body-Hash"

# Largest array index a JS object key can be; such keys are enumerated first.
_MAX_ARRAY_INDEX = 2**32 - 2
# JS prints numbers at or above this magnitude in exponent form.
_JS_EXPONENT_THRESHOLD = 1e21


def _is_array_index(key: str) -> bool:
    if not key.isdigit() or not key.isascii():
        return False
    if len(key) > 1 and key[0] == "0":
        return False
    return int(key) <= _MAX_ARRAY_INDEX


def _object_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    return json.dumps(_to_js_value(key))


def _to_js_value(value: Any) -> Any:
    """Normalize parsed JSON so ``json.dumps`` renders it as ``JSON.stringify`` would."""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < _JS_EXPONENT_THRESHOLD:
            return int(value)
        return value
    if isinstance(value, dict):
        items = [(_object_key(k), _to_js_value(v)) for k, v in value.items()]
        indexed = sorted(
            (item for item in items if _is_array_index(item[0])),
            key=lambda item: int(item[0]),
        )
        named = [item for item in items if not _is_array_index(item[0])]
        return dict(indexed + named)
    if isinstance(value, (list, tuple)):
        return [_to_js_value(v) for v in value]
    return value


def serialize_body(body: Any) -> bytes:
    """Return the exact bytes that were hashed by the sender.

    Raw ``str``/``bytes`` bodies are used as received. Parsed JSON is
    re-serialized the way ``JSON.stringify`` renders it: compact, whole
    floats as integers, non-finite numbers as ``null``, integer-like keys
    first in ascending order and the remaining keys in insertion order.
    """
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(
        _to_js_value(body), separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def compute_body_hash(card_token: str, body: Any) -> str:
    """Return base64(HMAC-SHA256(card_token, body))."""
    mac = hmac.HMAC(card_token.encode("utf-8"), hashes.SHA256())
    mac.update(serialize_body(body))
    return base64.b64encode(mac.finalize()).decode("utf-8")


def verify_hash(card_token: str, body: Any, hash_header: Optional[str]) -> bool:
    """Check ``hash_header`` against the body using a constant-time comparison."""
    if not hash_header:
        return False
    expected = compute_body_hash(card_token, body).encode("utf-8")
    return constant_time.bytes_eq(expected, hash_header.encode("utf-8"))
