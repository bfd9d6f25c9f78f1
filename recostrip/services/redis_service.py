import json
from typing import Any

import redis.asyncio as redis
from loguru import logger

from recostrip.core.config import settings


class RedisService:
    """
    Durable key-value store for the widget's whole-record reads and writes.

    Every operation is best effort: connection and server errors are logged and
    reported through the return value instead of being raised.
    """

    def __init__(self, client: redis.Redis | None = None) -> None:
        self._client: redis.Redis | None = client
        if client is None and not settings.REDIS_URL:
            logger.warning("REDIS_URL is not set. Redis operations will fail until configured.")

    async def get_client(self) -> redis.Redis:
        if self._client is None:
            logger.info("Creating Redis client for RedisService")
            self._client = redis.from_url(
                settings.REDIS_URL,
                decode_responses=True,
                encoding="utf-8",
                socket_connect_timeout=5,
                socket_timeout=5,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                health_check_interval=30,
                socket_keepalive=True,
            )
        return self._client

    async def set(self, key: str, value: Any) -> bool:
        """Replace the value stored under `key`.

        Args:
            key: The key to store the value under
            value: The value to store (will be converted to string)

        Returns:
            True if successful, False otherwise
        """
        try:
            client = await self.get_client()
            result = await client.set(key, str(value))
            return bool(result)
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to set key '{key}' in Redis: {exc}")
            return False

    async def get(self, key: str) -> str | None:
        """Get a value from Redis by key.

        Returns:
            The value as a string, or None if key doesn't exist or error occurred
        """
        try:
            client = await self.get_client()
            return await client.get(key)
        except UnicodeDecodeError as exc:
            logger.warning(f"Discarding undecodable record '{key}': {exc}")
            return None
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to get key '{key}' from Redis: {exc}")
            return None

    async def get_json(self, key: str) -> Any:
        """Decode the JSON record under `key`. Missing and undecodable records both give None."""
        raw = await self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError) as exc:
            logger.warning(f"Discarding corrupt record '{key}': {exc}")
            return None

    async def set_json(self, key: str, value: Any) -> bool:
        return await self.set(key, json.dumps(value, ensure_ascii=False))

    async def close(self) -> None:
        """Close and disconnect the Redis client"""
        if self._client is not None:
            try:
                await self._client.aclose()
                logger.info("RedisService client closed")
            except (redis.RedisError, OSError) as exc:
                logger.warning(f"Failed to close RedisService client: {exc}")
            finally:
                self._client = None


redis_service = RedisService()
