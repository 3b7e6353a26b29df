"""Generated catalog schemas."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from fastener_catalog.schemas.catalog_config import Category


class CatalogVariant(BaseModel):
    """One sellable variant of a product family.

    Variants are immutable once generated. Integer fields are strict, so a
    bool or fractional number in an artifact is a schema error rather than a
    coerced value. Range constraints are left to the catalog validator so
    that a bad artifact is reported per variant id instead of failing on the
    first out-of-range field.

    Attributes:
        id: Stable slug, derived from the family id and axis combination
        family: Product family id
        category: Fastener category
        standard: Product standard, always "JIS"
        attributes: Axis name to value, in axis declaration order
        pack_qty: Pieces per pack; drives shipping classification
        price_usd_cents: Pack price in whole USD cents
        image_url: Real product image, if any
        alternate_id: Id of the alternate SKU in the same catalog, if any
    """

    id: str
    family: str
    category: Category
    standard: str = "JIS"
    attributes: dict[str, str] = Field(default_factory=dict)
    pack_qty: StrictInt
    price_usd_cents: StrictInt
    image_url: str | None = None
    alternate_id: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def pack_type(self) -> str:
        """Pack label used by the legacy storefront, e.g. "PACK_10"."""
        return f"PACK_{self.pack_qty}"

    def __repr__(self) -> str:
        return f"<CatalogVariant(id='{self.id}', price_usd_cents={self.price_usd_cents})>"


__all__ = ["CatalogVariant"]
