"""
Persisted client state on Redis

Each logical store lives under its own string key as a JSON document
``{"state": {...}, "version": N}``. Reading and writing happen only through
``StateStorage``; nothing intercepts store mutations implicitly.
"""

import json
import logging
from typing import Any, Dict, Optional

import redis.asyncio as redis

from app.config import settings

logger = logging.getLogger(__name__)

USER_STORAGE_KEY = "user-storage"
FAVORITE_STORAGE_KEY = "favorite-storage"
ESCAPE_DATA_STORAGE_KEY = "escape-data-storage"

# Keys written by earlier releases that are dropped on startup
LEGACY_STORAGE_KEYS = ("review-storage",)

STORAGE_VERSION = 0


async def create_redis_client() -> redis.Redis:
    """
    Open the Redis connection used for persisted state
    """
    try:
        client = redis.from_url(
            settings.REDIS_URL,
            max_connections=settings.REDIS_MAX_CONNECTIONS,
            decode_responses=True
        )
        await client.ping()
        logger.info("Redis connection established")
        return client
    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e}")
        raise


class StateStorage:
    """Serialize/deserialize boundary for the persisted stores"""

    def __init__(self, client: redis.Redis):
        self.client = client

    async def load(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Return the stored state for ``name``, or None when it is missing or
        unreadable. Corrupted entries are removed.
        """
        raw = await self.client.get(name)
        if not raw:
            return None

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in storage key {name}: {e}")
            await self.client.delete(name)
            return None

        state = document.get("state") if isinstance(document, dict) else None
        if not isinstance(state, dict):
            logger.warning(f"Unexpected document shape in storage key {name}")
            await self.client.delete(name)
            return None

        return state

    async def save(self, name: str, state: Dict[str, Any]) -> None:
        document = {"state": state, "version": STORAGE_VERSION}
        await self.client.set(name, json.dumps(document, ensure_ascii=False, default=str))

    async def remove(self, name: str) -> bool:
        return bool(await self.client.delete(name))

    async def clear_legacy(self) -> int:
        removed = 0
        for key in LEGACY_STORAGE_KEYS:
            if await self.remove(key):
                logger.info(f"Removed legacy storage key {key}")
                removed += 1
        return removed

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except Exception:
            return False

    async def close(self) -> None:
        await self.client.close()
        logger.info("Redis connection closed")
