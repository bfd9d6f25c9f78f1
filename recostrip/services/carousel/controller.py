from collections.abc import Callable, Sequence

from loguru import logger

from recostrip.models.carousel import CarouselSnapshot, CarouselState, LayoutConfig, NavDirection
from recostrip.models.product import Product
from recostrip.services.carousel import engine

SnapshotListener = Callable[[CarouselSnapshot], None]


class CarouselController:
    """
    Owns the carousel state for one widget instance.

    Layout and navigation intents are dispatched through `on_layout_changed`
    and `on_navigate`. Until `load()` is called there is no state: navigation
    is ignored and only the latest layout change is kept for later.
    """

    def __init__(self, layout: LayoutConfig | None = None):
        self.layout = layout or LayoutConfig.from_settings()
        self._state: CarouselState | None = None
        self._pending_layout: tuple[int, int | None] | None = None
        self._listeners: list[SnapshotListener] = []

    @property
    def state(self) -> CarouselState | None:
        return self._state

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a snapshot listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def snapshot(self) -> CarouselSnapshot | None:
        if self._state is None:
            return None
        return engine.snapshot(self._state, self.layout)

    def load(self, items: Sequence[Product]) -> CarouselSnapshot:
        """Initialize with the resolved catalog. Items are fixed from here on."""
        if self._state is not None:
            logger.warning("Carousel already loaded; ignoring new item list")
            return self.snapshot()

        self._state = engine.initial_state(items)
        logger.debug(f"Carousel loaded with {len(self._state.items)} item(s)")

        if self._pending_layout is not None:
            viewport_width, container_width = self._pending_layout
            self._pending_layout = None
            self._state = engine.recompute(self._state, self.layout, viewport_width, container_width)

        return self._emit()

    def on_layout_changed(self, viewport_width: int, container_width: int | None = None) -> CarouselSnapshot | None:
        if self._state is None:
            self._pending_layout = (viewport_width, container_width)
            logger.debug(f"Layout change queued until catalog loads (viewport={viewport_width})")
            return None

        self._state = engine.recompute(self._state, self.layout, viewport_width, container_width)
        return self._emit()

    def on_navigate(self, direction: NavDirection | str) -> CarouselSnapshot | None:
        if self._state is None:
            logger.debug(f"Ignoring navigation '{direction}' before catalog load")
            return None

        try:
            direction = NavDirection(direction)
        except ValueError:
            logger.debug(f"Ignoring unknown navigation direction '{direction}'")
            return self.snapshot()

        new_state = engine.navigate(self._state, direction)
        if new_state is self._state:
            return self.snapshot()

        self._state = new_state
        return self._emit()

    def prev(self) -> CarouselSnapshot | None:
        return self.on_navigate(NavDirection.PREV)

    def next(self) -> CarouselSnapshot | None:
        return self.on_navigate(NavDirection.NEXT)

    def _emit(self) -> CarouselSnapshot:
        current = engine.snapshot(self._state, self.layout)
        for listener in list(self._listeners):
            listener(current)
        return current
