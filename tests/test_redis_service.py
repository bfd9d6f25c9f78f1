"""Unit tests for the best-effort Redis wrapper."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import redis.asyncio as redis

from recostrip.services.redis_service import RedisService


@pytest.mark.asyncio
async def test_json_round_trip(store, memory_redis):
    assert await store.set_json("k", ["ø", 1])
    assert memory_redis.data["k"] == '["ø", 1]'
    assert await store.get_json("k") == ["ø", 1]


@pytest.mark.asyncio
async def test_get_json_discards_corrupt_value(store, memory_redis):
    memory_redis.data["k"] = "{oops"
    assert await store.get_json("k") is None


@pytest.mark.asyncio
async def test_redis_errors_are_reported_not_raised():
    client = MagicMock()
    client.get = AsyncMock(side_effect=redis.ConnectionError("Connection refused"))
    client.set = AsyncMock(side_effect=redis.ResponseError("OOM"))
    service = RedisService(client=client)

    assert await service.get("k") is None
    assert await service.set("k", "v") is False


@pytest.mark.asyncio
async def test_other_errors_propagate():
    client = MagicMock()
    client.get = AsyncMock(side_effect=ValueError("Not a Redis error"))
    service = RedisService(client=client)

    with pytest.raises(ValueError):
        await service.get("k")


@pytest.mark.asyncio
async def test_close_releases_client(store, memory_redis):
    await store.close()
    assert memory_redis.closed
    await store.close()


@pytest.mark.asyncio
async def test_undecodable_value_reads_as_missing(store, memory_redis):
    memory_redis.data["k"] = b"\xff\xfe[1]"
    assert await store.get("k") is None
    assert await store.get_json("k") is None
