"""Shared fixtures: an in-memory Redis double and sample catalog data."""

from __future__ import annotations

import pytest
import redis.asyncio as redis

from recostrip.models.carousel import LayoutConfig
from recostrip.models.product import Product
from recostrip.services.redis_service import RedisService


class InMemoryRedis:
    """Implements the handful of ``redis.asyncio.Redis`` calls RedisService makes."""

    def __init__(self) -> None:
        self.data: dict[str, str | bytes] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.writes: list[tuple[str, str]] = []
        self.closed = False

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise redis.ConnectionError("read refused")
        value = self.data.get(key)
        if isinstance(value, bytes):
            # decode_responses=True decodes on read
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> bool:
        if self.fail_writes:
            raise redis.ConnectionError("OOM command not allowed when used memory > 'maxmemory'")
        self.data[key] = value
        self.writes.append((key, value))
        return True

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def memory_redis() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def store(memory_redis: InMemoryRedis) -> RedisService:
    return RedisService(client=memory_redis)


@pytest.fixture
def layout() -> LayoutConfig:
    return LayoutConfig(card_width=240, card_margin=20, chrome_padding=80, narrow_viewport_max=480)


def make_products(count: int) -> list[Product]:
    return [
        Product(
            id=i,
            name=f"Basic Shirt {i}",
            price=99.99 + i,
            img=f"https://cdn.example.com/{i}.jpg",
            url=f"https://shop.example.com/p/{i}",
        )
        for i in range(1, count + 1)
    ]


@pytest.fixture
def ten_products() -> list[Product]:
    return make_products(10)


@pytest.fixture
def catalog_payload() -> list[dict]:
    return [
        {
            "id": 1,
            "name": "Slim Fit Jeans",
            "price": 899.99,
            "img": "https://cdn.example.com/jeans.jpg",
            "url": "https://shop.example.com/jeans",
            "brand": "ignored",
        },
        {"id": 2, "name": "Cotton Tee", "price": 149.5, "url": "https://shop.example.com/tee"},
        {"id": 3, "name": "Wool Scarf", "price": 0},
    ]


@pytest.fixture
def product_factory():
    return make_products
