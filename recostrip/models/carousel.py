from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from recostrip.core.config import settings
from recostrip.models.product import Product


class NavDirection(str, Enum):
    PREV = "prev"
    NEXT = "next"


class LayoutConfig(BaseModel):
    """Fixed layout constants handed over by the host page, in px."""

    model_config = ConfigDict(frozen=True)

    card_width: int = Field(default=240, gt=0)
    card_margin: int = Field(default=20, ge=0)
    chrome_padding: int = Field(default=80, ge=0)
    narrow_viewport_max: int = Field(default=480, ge=0)
    container_max_width: int = Field(default=1200, gt=0)

    @property
    def card_stride(self) -> int:
        return self.card_width + self.card_margin

    @classmethod
    def from_settings(cls) -> "LayoutConfig":
        return cls(
            card_width=settings.CARD_WIDTH,
            card_margin=settings.CARD_MARGIN,
            chrome_padding=settings.CHROME_PADDING,
            narrow_viewport_max=settings.NARROW_VIEWPORT_MAX,
            container_max_width=settings.CONTAINER_MAX_WIDTH,
        )


class CarouselState(BaseModel):
    """
    Paging window over a fixed product list.

    `position` is the index of the left-most visible item. Only the transition
    functions in `recostrip.services.carousel.engine` build new states.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[Product, ...] = ()
    items_per_view: int = Field(default=1, ge=1)
    position: int = Field(default=0, ge=0)

    @property
    def max_position(self) -> int:
        return max(0, len(self.items) - self.items_per_view)

    @property
    def has_prev(self) -> bool:
        return self.position > 0

    @property
    def has_next(self) -> bool:
        return self.position < len(self.items) - self.items_per_view

    @property
    def visible_items(self) -> tuple[Product, ...]:
        return self.items[self.position : self.position + self.items_per_view]


class CarouselSnapshot(BaseModel):
    """What the rendering side needs to apply after every state change."""

    model_config = ConfigDict(frozen=True)

    position: int
    items_per_view: int
    prev_enabled: bool
    next_enabled: bool
    offset: int

    def as_tuple(self) -> tuple[int, int, bool, bool, int]:
        return (self.position, self.items_per_view, self.prev_enabled, self.next_enabled, self.offset)
