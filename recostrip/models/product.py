from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

ProductId = int | str


class Product(BaseModel):
    """A catalog entry as consumed by the carousel."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: ProductId
    name: str
    price: float = Field(ge=0)
    img: str | None = None
    url: str | None = None


_product_list = TypeAdapter(list[Product])


def parse_products(payload: Any) -> list[Product] | None:
    """
    Validate a decoded JSON payload as a product list.

    Returns None when the payload is not a list of product records, so callers
    can treat it the same way as a missing record.
    """
    if not isinstance(payload, list):
        return None
    try:
        return _product_list.validate_python(payload)
    except ValidationError:
        return None


def dump_products(products: list[Product]) -> list[dict[str, Any]]:
    return _product_list.dump_python(products, mode="json")
