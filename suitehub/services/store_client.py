"""
Key-value store initialization and helpers
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from suitehub.core.config import settings
from suitehub.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_store_client() -> Optional[redis.Redis]:
    """Return a cached Redis client, or None when no store is configured.

    Expects the endpoint in REDIS_URL and, for hosted stores, the access token
    in REDIS_TOKEN (sent as the connection password).
    """
    if not settings.store_configured:
        logger.warning("REDIS_URL not set; key-value store disabled")
        return None

    return redis.from_url(
        settings.REDIS_URL,
        password=settings.REDIS_TOKEN or None,
        decode_responses=True,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
    )


def get_store() -> Optional[redis.Redis]:
    """FastAPI dependency yielding the shared store client."""
    return get_store_client()


def require_store(store: Optional[redis.Redis]) -> redis.Redis:
    if store is None:
        raise StoreUnavailableError("Key-value store not configured")
    return store


async def ping(store: Optional[redis.Redis]) -> bool:
    """Check that the store answers; never raises."""
    if store is None:
        return False
    try:
        return bool(await store.ping())
    except RedisError as e:
        logger.error(f"Store ping failed: {e}")
        return False
