from loguru import logger

from recostrip.core.config import settings
from recostrip.core.constants import FAVORITES_KEY
from recostrip.models.favorites import FavoriteSet, ToggleResult
from recostrip.models.product import ProductId
from recostrip.services.redis_service import RedisService, redis_service


def _is_product_id(value: object) -> bool:
    return isinstance(value, (int, str)) and not isinstance(value, bool)


class FavoritesStore:
    """
    Write-through persistence for the favorite set.

    The favorites record is a JSON list of ids. A missing or corrupt record
    loads as an empty set; a rejected write leaves the in-memory set in charge.
    """

    def __init__(self, store: RedisService | None = None, key: str | None = None):
        self.store = store or redis_service
        self.key = key or FAVORITES_KEY.format(prefix=settings.REDIS_KEY_PREFIX)

    async def load(self) -> FavoriteSet:
        raw = await self.store.get_json(self.key)
        if raw is None:
            return FavoriteSet()

        if not isinstance(raw, list) or not all(_is_product_id(v) for v in raw):
            logger.warning(f"Favorites record '{self.key}' is malformed; starting with no favorites")
            return FavoriteSet()

        favorites = FavoriteSet.from_ids(raw)
        logger.debug(f"Loaded {len(favorites)} favorite(s)")
        return favorites

    @staticmethod
    def is_favorite(favorites: FavoriteSet, product_id: ProductId) -> bool:
        return product_id in favorites

    async def save(self, favorites: FavoriteSet) -> bool:
        return await self.store.set_json(self.key, list(favorites.ids))

    async def toggle(self, favorites: FavoriteSet, product_id: ProductId) -> ToggleResult:
        updated = favorites.toggled(product_id)
        persisted = await self.save(updated)
        if not persisted:
            logger.warning(f"Favorite toggle for {product_id} kept in memory only")

        return ToggleResult(
            favorites=updated,
            product_id=product_id,
            is_favorite=product_id in updated,
            persisted=persisted,
        )
