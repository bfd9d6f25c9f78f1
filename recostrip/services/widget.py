from loguru import logger

from recostrip.models.carousel import CarouselSnapshot, LayoutConfig, NavDirection
from recostrip.models.favorites import FavoriteSet, ToggleResult
from recostrip.models.product import Product, ProductId
from recostrip.services.carousel import CarouselController
from recostrip.services.catalog.cache import CatalogCache
from recostrip.services.favorites import FavoritesStore
from recostrip.services.redis_service import RedisService, redis_service
from recostrip.services.renderer import WidgetRenderer


class RecommendationWidget:
    """
    Facade for one mounted recommendation strip.

    Favorites load first, then the catalog resolves, then the carousel is
    initialized with the session's item list. Intents arriving afterwards are
    dispatched to the favorites store or the carousel controller.
    """

    def __init__(
        self,
        store: RedisService | None = None,
        catalog: CatalogCache | None = None,
        favorites_store: FavoritesStore | None = None,
        layout: LayoutConfig | None = None,
        renderer: WidgetRenderer | None = None,
    ):
        self.layout = layout or LayoutConfig.from_settings()
        self.store = store or redis_service
        self.catalog = catalog or CatalogCache(store=self.store)
        self.favorites_store = favorites_store or FavoritesStore(store=self.store)
        self.carousel = CarouselController(self.layout)
        self.renderer = renderer or WidgetRenderer(self.layout)
        self.favorites = FavoriteSet()
        self._favorites_loaded = False
        self.products: list[Product] = []

    async def start(self, viewport_width: int, container_width: int | None = None) -> str | None:
        """Load everything and return the initial markup, or None when there is nothing to show."""
        await self._load_favorites()
        self.carousel.on_layout_changed(viewport_width, container_width)

        self.products = await self.catalog.resolve()
        self.carousel.load(self.products)

        if not self.products:
            logger.info("Catalog is empty; recommendation strip will not be shown")
            return None
        return self.render()

    def render(self) -> str | None:
        current = self.carousel.snapshot()
        if current is None or not self.products:
            return None
        return self.renderer.render(current, self.products, self.favorites)

    def on_layout_changed(self, viewport_width: int, container_width: int | None = None) -> CarouselSnapshot | None:
        return self.carousel.on_layout_changed(viewport_width, container_width)

    def on_navigate(self, direction: NavDirection | str) -> CarouselSnapshot | None:
        return self.carousel.on_navigate(direction)

    def is_favorite(self, product_id: ProductId) -> bool:
        return self.favorites_store.is_favorite(self.favorites, product_id)

    async def on_toggle_favorite(self, product_id: ProductId) -> ToggleResult:
        if not self._favorites_loaded:
            await self._load_favorites()
        result = await self.favorites_store.toggle(self.favorites, product_id)
        self.favorites = result.favorites
        return result

    async def _load_favorites(self) -> None:
        self.favorites = await self.favorites_store.load()
        self._favorites_loaded = True

    async def close(self) -> None:
        await self.catalog.close()
        await self.store.close()
