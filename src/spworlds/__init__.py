"""Client for the SPWorlds public economy API."""

from .crypto.webhook import BODY_HASH_HEADER, compute_body_hash, verify_hash
from .domain.entities import CardCredentials
from .domain.errors import SPWorldsAPIError
from .env import Settings, get_settings
from .infrastructure.spworlds_client import AsyncSPWorldsClient, SPWorldsClient
from .middleware.body_hash import BodyHashMiddleware

__all__ = [
    "AsyncSPWorldsClient",
    "BODY_HASH_HEADER",
    "BodyHashMiddleware",
    "CardCredentials",
    "SPWorldsAPIError",
    "SPWorldsClient",
    "Settings",
    "compute_body_hash",
    "get_settings",
    "verify_hash",
]
