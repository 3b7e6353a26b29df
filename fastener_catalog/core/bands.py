"""Shipping band resolution.

A variant's band is a pure function of its pack quantity and is never stored.
Each schema version has its own closed mapping table; a pack quantity missing
from a table is a configuration error, not something to default.
"""

from fastener_catalog.core.errors import UnknownPackError
from fastener_catalog.schemas.shipping import (
    LegacyShippingBand,
    ShippingBand,
    ShippingSchema,
)

LEGACY_BAND_BY_PACK_QTY: dict[int, LegacyShippingBand] = {
    10: LegacyShippingBand.BAND_A,
    20: LegacyShippingBand.BAND_B,
    50: LegacyShippingBand.BAND_B,
    100: LegacyShippingBand.BAND_B,
}

BAND_BY_PACK_QTY: dict[int, ShippingBand] = {
    10: ShippingBand.BAND_A_10PCS,
    20: ShippingBand.BAND_B_20PCS,
    50: ShippingBand.BAND_C_BULK,
    100: ShippingBand.BAND_C_BULK,
}

# Pack quantities every schema can classify.
PACK_QUANTITIES: tuple[int, ...] = tuple(
    sorted(set(LEGACY_BAND_BY_PACK_QTY) & set(BAND_BY_PACK_QTY))
)


def legacy_band_for_pack_qty(pack_qty: int) -> LegacyShippingBand:
    """Classify a pack quantity under the legacy two-band table."""
    try:
        return LEGACY_BAND_BY_PACK_QTY[pack_qty]
    except (KeyError, TypeError):
        raise UnknownPackError(pack_qty, ShippingSchema.LEGACY.value) from None


def band_for_pack_qty(pack_qty: int) -> ShippingBand:
    """Classify a pack quantity under the current rule-table bands."""
    try:
        return BAND_BY_PACK_QTY[pack_qty]
    except (KeyError, TypeError):
        raise UnknownPackError(pack_qty, ShippingSchema.CURRENT.value) from None


def resolve_band(
    pack_qty: int, schema: ShippingSchema
) -> LegacyShippingBand | ShippingBand:
    """Classify a pack quantity under the given schema.

    Args:
        pack_qty: Pieces per pack
        schema: Active price-table schema

    Returns:
        The band for that schema

    Raises:
        UnknownPackError: If the quantity is outside the mapping domain
    """
    if schema is ShippingSchema.LEGACY:
        return legacy_band_for_pack_qty(pack_qty)
    return band_for_pack_qty(pack_qty)


def is_known_pack_qty(pack_qty: object) -> bool:
    """True if every schema can classify this pack quantity."""
    if isinstance(pack_qty, bool) or not isinstance(pack_qty, int):
        return False
    return pack_qty in PACK_QUANTITIES
