from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from recostrip.core.config import settings
from recostrip.core.constants import FAVORITE_MARK, NOT_FAVORITE_MARK
from recostrip.models.carousel import CarouselSnapshot, LayoutConfig
from recostrip.models.favorites import FavoriteSet
from recostrip.models.product import Product

# recostrip/services/renderer.py -> recostrip/services -> recostrip
templates_dir = Path(__file__).resolve().parent.parent / "templates"

jinja_env = Environment(
    loader=FileSystemLoader(str(templates_dir)),
    autoescape=select_autoescape(["html"]),
)


def format_price(price: float) -> str:
    """Two decimals, '.' for thousands and ',' for decimals: 1234.5 -> '1.234,50 TRY'."""
    grouped = f"{price:,.2f}"
    localized = (
        grouped.replace(",", "\0")
        .replace(".", settings.PRICE_DECIMAL_SEPARATOR)
        .replace("\0", settings.PRICE_THOUSANDS_SEPARATOR)
    )
    return f"{localized} {settings.CURRENCY_LABEL}"


def initials(name: str) -> str:
    """Placeholder text for cards without an image."""
    return "".join(word[0] for word in name.split())[:2].upper()


class WidgetRenderer:
    """Renders the carousel markup from an engine snapshot."""

    def __init__(self, layout: LayoutConfig | None = None, template_name: str = "carousel.html"):
        self.layout = layout or LayoutConfig.from_settings()
        self.template = jinja_env.get_template(template_name)

    def build_card(self, product: Product, favorites: FavoriteSet) -> dict:
        is_fav = product.id in favorites
        if not product.url:
            logger.warning(f"Cannot find url for product: {product.id} - {product.name}")
        return {
            "id": product.id,
            "name": product.name,
            "img": product.img,
            "url": product.url,
            "initials": initials(product.name),
            "price": format_price(product.price),
            "is_favorite": is_fav,
            "mark": FAVORITE_MARK if is_fav else NOT_FAVORITE_MARK,
        }

    def render(self, snapshot: CarouselSnapshot, products: list[Product], favorites: FavoriteSet) -> str:
        return self.template.render(
            title=settings.WIDGET_TITLE,
            snapshot=snapshot,
            card_width=self.layout.card_width,
            cards=[self.build_card(p, favorites) for p in products],
        )
