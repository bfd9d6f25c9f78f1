from pydantic import BaseModel, ConfigDict

from recostrip.models.product import ProductId


class FavoriteSet(BaseModel):
    """
    Favorited product ids in insertion order, without duplicates.

    Instances are immutable; toggling returns a new set.
    """

    model_config = ConfigDict(frozen=True)

    ids: tuple[ProductId, ...] = ()

    @classmethod
    def from_ids(cls, ids) -> "FavoriteSet":
        unique: list[ProductId] = []
        for product_id in ids:
            if product_id not in unique:
                unique.append(product_id)
        return cls(ids=tuple(unique))

    def __contains__(self, product_id: object) -> bool:
        return product_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    # Membership defines identity; insertion order only matters for storage.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FavoriteSet):
            return NotImplemented
        return frozenset(self.ids) == frozenset(other.ids)

    def __hash__(self) -> int:
        return hash(frozenset(self.ids))

    def toggled(self, product_id: ProductId) -> "FavoriteSet":
        if product_id in self.ids:
            return FavoriteSet(ids=tuple(i for i in self.ids if i != product_id))
        return FavoriteSet(ids=self.ids + (product_id,))


class ToggleResult(BaseModel):
    """Outcome of a favorite toggle. `favorites` is authoritative even when `persisted` is False."""

    model_config = ConfigDict(frozen=True)

    favorites: FavoriteSet
    product_id: ProductId
    is_favorite: bool
    persisted: bool
