"""Read-only lookups over a validated catalog."""

from collections.abc import Iterator, Sequence

from fastener_catalog.core.validator import validate_catalog
from fastener_catalog.schemas.catalog import CatalogVariant


class CatalogIndex:
    """Immutable index over one catalog generation.

    Built once per loaded artifact and passed explicitly to request-time
    code. The catalog is validated on construction.

    Usage:
        index = CatalogIndex(load_catalog())
        variant = index.get("nut-hex-m6-zinc-10pcs")
    """

    def __init__(self, variants: Sequence[CatalogVariant]) -> None:
        validate_catalog(variants)
        self._variants: tuple[CatalogVariant, ...] = tuple(variants)
        self._by_id: dict[str, CatalogVariant] = {v.id: v for v in self._variants}

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[CatalogVariant]:
        return iter(self._variants)

    def __contains__(self, variant_id: object) -> bool:
        return variant_id in self._by_id

    @property
    def variants(self) -> tuple[CatalogVariant, ...]:
        """All variants in catalog order."""
        return self._variants

    def get(self, variant_id: str) -> CatalogVariant | None:
        """Get a variant by id, or None."""
        return self._by_id.get(variant_id)

    def by_family(self, family: str) -> list[CatalogVariant]:
        """Variants of one product family, in catalog order."""
        return [v for v in self._variants if v.family == family]

    def by_category(self, category: str) -> list[CatalogVariant]:
        """Variants of one category, in catalog order."""
        return [v for v in self._variants if v.category == category]

    def alternate_of(self, variant_id: str) -> CatalogVariant | None:
        """The alternate SKU of a variant, if it declares one."""
        variant = self.get(variant_id)
        if variant is None or variant.alternate_id is None:
            return None
        return self.get(variant.alternate_id)
