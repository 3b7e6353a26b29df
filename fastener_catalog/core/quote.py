"""Cart shipping quote under the zone/rule schema."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from fastener_catalog.core.bands import band_for_pack_qty
from fastener_catalog.core.carrier import CarrierSelection, select_carrier
from fastener_catalog.core.catalog_index import CatalogIndex
from fastener_catalog.core.errors import NoCarrierAvailableError, UnknownVariantError
from fastener_catalog.core.shipping import DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS
from fastener_catalog.core.zones import resolve_zone
from fastener_catalog.schemas.shipping import (
    CarrierPolicy,
    CartLine,
    ShippingBand,
    ShippingRule,
    ShippingZone,
)

# Estimated shipping weight of one pack, by band.
EST_WEIGHT_KG_PER_PACK: dict[ShippingBand, float] = {
    ShippingBand.BAND_A_10PCS: 0.3,
    ShippingBand.BAND_B_20PCS: 0.6,
    ShippingBand.BAND_C_BULK: 1.5,
}


@dataclass(frozen=True)
class ShippingQuote:
    """Shipping quote for a cart."""

    zone: str
    subtotal_usd_cents: int
    weight_kg: float
    selection: CarrierSelection
    warning_note: str | None = None

    @property
    def shipping_price_usd_cents(self) -> int:
        return self.selection.shipping_price_usd_cents


def quote_shipping(
    country_code: str,
    lines: Sequence[CartLine],
    catalog: CatalogIndex,
    zones: Iterable[ShippingZone],
    rules: Iterable[ShippingRule],
    policies: Iterable[CarrierPolicy],
    surcharge_per_extra_band_usd_cents: int = DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS,
) -> ShippingQuote:
    """Quote shipping for a cart to a destination country.

    Args:
        country_code: Destination country
        lines: Cart lines
        catalog: Current catalog generation
        zones: Configured zones
        rules: All rule rows; filtered to the resolved zone
        policies: All carrier policies; the resolved zone's one applies

    Returns:
        ShippingQuote

    Raises:
        UnknownVariantError: If a line names a variant not in the catalog
        NoCarrierAvailableError: If no zone resolves or no carrier covers the cart
    """
    subtotal = 0
    weight_kg = 0.0
    bands: list[ShippingBand] = []

    for line in lines:
        variant = catalog.get(line.variant_id)
        if variant is None:
            raise UnknownVariantError(line.variant_id)
        band = band_for_pack_qty(variant.pack_qty)
        subtotal += variant.price_usd_cents * line.quantity
        weight_kg += EST_WEIGHT_KG_PER_PACK[band] * line.quantity
        bands.append(band)

    zone = resolve_zone(country_code, zones)
    if zone is None:
        raise NoCarrierAvailableError(f"No shipping zone for country {country_code!r}")

    zone_rules = [rule for rule in rules if rule.zone == zone.name]
    policy = next((p for p in policies if p.zone == zone.name), None)

    selection = select_carrier(
        zone_name=zone.name,
        bands=bands,
        subtotal_usd_cents=subtotal,
        weight_kg=weight_kg,
        policy=policy,
        rules=zone_rules,
        surcharge_per_extra_band_usd_cents=surcharge_per_extra_band_usd_cents,
    )

    base_band = selection.candidate.breakdown.base_band
    note = next(
        (
            rule.notes
            for rule in zone_rules
            if rule.carrier == selection.carrier and rule.band == base_band
        ),
        None,
    )

    return ShippingQuote(
        zone=zone.name,
        subtotal_usd_cents=subtotal,
        weight_kg=round(weight_kg, 3),
        selection=selection,
        warning_note=note,
    )
