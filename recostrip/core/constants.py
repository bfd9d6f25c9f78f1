"""
Core constants used across the widget. Keep these simple and documented.
"""

from typing import Final

# Durable records, formatted with settings.REDIS_KEY_PREFIX
FAVORITES_KEY: Final[str] = "{prefix}:favorites"
CATALOG_KEY: Final[str] = "{prefix}:catalog"

# Navigation never skips more than one card
NAVIGATION_STEP: Final[int] = 1
MIN_ITEMS_PER_VIEW: Final[int] = 1

FAVORITE_MARK: Final[str] = "♥"
NOT_FAVORITE_MARK: Final[str] = "♡"
