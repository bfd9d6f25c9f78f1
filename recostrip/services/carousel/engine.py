"""
Carousel paging engine.

Pure transition functions over `CarouselState`. Nothing here touches I/O or
rendering; every function returns a new state (or the same instance when the
transition is a no-op).
"""

from collections.abc import Sequence

from recostrip.core.constants import MIN_ITEMS_PER_VIEW, NAVIGATION_STEP
from recostrip.models.carousel import CarouselSnapshot, CarouselState, LayoutConfig, NavDirection
from recostrip.models.product import Product


def compute_items_per_view(layout: LayoutConfig, viewport_width: int, container_width: int | None = None) -> int:
    """
    How many cards fit side by side.

    Narrow viewports always page one card at a time, whatever the container
    arithmetic says. Result is never below one and never decreases as the
    container grows.
    """
    if viewport_width <= layout.narrow_viewport_max:
        return MIN_ITEMS_PER_VIEW

    if container_width is None:
        container_width = min(viewport_width, layout.container_max_width)

    available = container_width - layout.chrome_padding
    return max(MIN_ITEMS_PER_VIEW, available // layout.card_stride)


def clamp_position(position: int, item_count: int, items_per_view: int) -> int:
    return min(max(0, position), max(0, item_count - items_per_view))


def initial_state(items: Sequence[Product]) -> CarouselState:
    return CarouselState(items=tuple(items))


def recompute(
    state: CarouselState, layout: LayoutConfig, viewport_width: int, container_width: int | None = None
) -> CarouselState:
    """Apply a layout change. Calling it twice with the same widths is a no-op."""
    items_per_view = compute_items_per_view(layout, viewport_width, container_width)
    position = clamp_position(state.position, len(state.items), items_per_view)
    if items_per_view == state.items_per_view and position == state.position:
        return state
    return state.model_copy(update={"items_per_view": items_per_view, "position": position})


def move_prev(state: CarouselState) -> CarouselState:
    if not state.has_prev:
        return state
    return state.model_copy(update={"position": state.position - NAVIGATION_STEP})


def move_next(state: CarouselState) -> CarouselState:
    if not state.has_next:
        return state
    return state.model_copy(update={"position": state.position + NAVIGATION_STEP})


def navigate(state: CarouselState, direction: NavDirection) -> CarouselState:
    if direction is NavDirection.PREV:
        return move_prev(state)
    return move_next(state)


def snapshot(state: CarouselState, layout: LayoutConfig) -> CarouselSnapshot:
    return CarouselSnapshot(
        position=state.position,
        items_per_view=state.items_per_view,
        prev_enabled=state.has_prev,
        next_enabled=state.has_next,
        offset=state.position * layout.card_stride,
    )
