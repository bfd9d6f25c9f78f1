import httpx
from loguru import logger

from recostrip.core.config import settings
from recostrip.core.constants import CATALOG_KEY
from recostrip.models.product import Product, dump_products, parse_products
from recostrip.services.catalog.client import CatalogClient
from recostrip.services.redis_service import RedisService, redis_service


class CatalogCache:
    """
    Session catalog, cache first.

    A valid durable record is used as-is and never refreshed. Otherwise the
    remote endpoint is fetched once and the result stored. Any failure
    resolves to an empty list, which callers read as "nothing to show".
    """

    def __init__(
        self,
        client: CatalogClient | None = None,
        store: RedisService | None = None,
        key: str | None = None,
    ):
        self.client = client or CatalogClient()
        self.store = store or redis_service
        self.key = key or CATALOG_KEY.format(prefix=settings.REDIS_KEY_PREFIX)
        self._products: list[Product] | None = None

    async def resolve(self) -> list[Product]:
        if self._products is not None:
            return list(self._products)

        cached = await self._read_cached()
        if cached is not None:
            logger.debug(f"Catalog served from cache ({len(cached)} item(s))")
            self._products = cached
            return list(cached)

        self._products = await self._fetch_and_store()
        return list(self._products)

    async def _read_cached(self) -> list[Product] | None:
        raw = await self.store.get_json(self.key)
        if raw is None:
            return None
        products = parse_products(raw)
        if products is None:
            logger.warning(f"Catalog record '{self.key}' is malformed; fetching from remote")
        return products

    async def _fetch_and_store(self) -> list[Product]:
        try:
            payload = await self.client.fetch_products()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Catalog fetch failed, showing nothing: {exc}")
            return []

        products = parse_products(payload)
        if products is None:
            logger.warning("Catalog endpoint returned a malformed payload, showing nothing")
            return []

        if await self.store.set_json(self.key, dump_products(products)):
            logger.info(f"Cached {len(products)} catalog item(s)")
        return products

    async def close(self) -> None:
        await self.client.close()
