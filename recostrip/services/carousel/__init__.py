from recostrip.services.carousel.controller import CarouselController, SnapshotListener
from recostrip.services.carousel.engine import (
    clamp_position,
    compute_items_per_view,
    move_next,
    move_prev,
    recompute,
    snapshot,
)

__all__ = [
    "CarouselController",
    "SnapshotListener",
    "clamp_position",
    "compute_items_per_view",
    "move_next",
    "move_prev",
    "recompute",
    "snapshot",
]
