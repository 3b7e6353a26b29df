"""Flatten the active price-table schema into a band -> cents mapping.

Also checks a catalog against a table so that no variant can reach checkout
with a band the table does not price.
"""

from collections.abc import Iterable, Mapping, Sequence

from fastener_catalog.core.bands import legacy_band_for_pack_qty, resolve_band
from fastener_catalog.core.errors import ConfigError, MissingRateError
from fastener_catalog.core.shipping import (
    DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS,
    ShippingBreakdown,
    compute_shipping,
)
from fastener_catalog.schemas.catalog import CatalogVariant
from fastener_catalog.schemas.shipping import (
    Carrier,
    LegacyShippingBand,
    ShippingBand,
    ShippingRate,
    ShippingRule,
    ShippingSchema,
)


def price_table_from_rates(
    rates: Iterable[ShippingRate],
) -> dict[LegacyShippingBand, int]:
    """Build the legacy price table from flat rate rows.

    Raises:
        ConfigError: If a band has more than one row
    """
    table: dict[LegacyShippingBand, int] = {}
    for rate in rates:
        if rate.band in table:
            raise ConfigError(f"Duplicate shipping rate for band {rate.band}")
        table[rate.band] = rate.amount_usd_cents
    return table


def price_table_from_rules(
    rules: Iterable[ShippingRule],
    carrier: Carrier,
    zone: str | None = None,
) -> dict[ShippingBand, int]:
    """Build a current-schema price table for one carrier.

    Args:
        rules: Rule rows, possibly spanning carriers and zones
        carrier: Carrier whose rows are used
        zone: Restrict to this zone; rows are assumed pre-filtered when None

    Raises:
        ConfigError: If the same band appears twice for the carrier and zone
    """
    table: dict[ShippingBand, int] = {}
    for rule in rules:
        if rule.carrier != carrier or (zone is not None and rule.zone != zone):
            continue
        if rule.band in table:
            raise ConfigError(
                f"Duplicate shipping rule for band {rule.band} carrier={carrier} zone={rule.zone}"
            )
        table[rule.band] = rule.price_usd_cents
    return table


def compute_legacy_shipping(
    pack_qtys: Iterable[int],
    rates: Iterable[ShippingRate],
    surcharge_per_extra_band_usd_cents: int = DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS,
) -> ShippingBreakdown[LegacyShippingBand]:
    """Price a cart under the legacy flat table."""
    bands = [legacy_band_for_pack_qty(qty) for qty in pack_qtys]
    return compute_shipping(
        bands,
        price_table_from_rates(rates),
        surcharge_per_extra_band_usd_cents,
    )


def assert_rate_coverage(
    variants: Sequence[CatalogVariant],
    price_by_band: Mapping[str, int],
    schema: ShippingSchema,
) -> None:
    """Ensure every variant's band has a price in the table.

    Raises:
        UnknownPackError: If a variant's pack quantity has no band
        MissingRateError: For the first variant whose band is unpriced
    """
    for variant in variants:
        band = resolve_band(variant.pack_qty, schema)
        if band not in price_by_band:
            raise MissingRateError(str(band), variant_id=variant.id)


def parse_price_table(
    raw: Mapping[str, object], schema: ShippingSchema
) -> dict[LegacyShippingBand, int] | dict[ShippingBand, int]:
    """Parse a {"BAND_...": cents} mapping read from a rates file.

    Raises:
        ConfigError: On an unknown band name or a non-integer/negative amount
    """
    band_type = LegacyShippingBand if schema is ShippingSchema.LEGACY else ShippingBand
    table = {}
    for name, amount in raw.items():
        try:
            band = band_type(name)
        except ValueError:
            raise ConfigError(f"Unknown {schema.value} shipping band: {name}") from None
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise ConfigError(f"Invalid amount for {name}: {amount!r}")
        table[band] = amount
    return table
