"""Multi-band shipping cost calculation.

A cart is shipped at the price of its most expensive distinct band (the
"largest box" it needs) plus a flat surcharge for every further distinct
band. Repeated occurrences of a band never add cost. The same calculation
serves the legacy flat table and the current zone/rule table; callers
flatten whichever is active into a band -> cents mapping first.
"""

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from fastener_catalog.core.errors import MissingRateError

DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS = 500

BandT = TypeVar("BandT", bound=Hashable)


@dataclass(frozen=True)
class ShippingBreakdown(Generic[BandT]):
    """Cost breakdown for one cart.

    base_band is None only for an empty cart.
    """

    distinct_bands: tuple[BandT, ...]
    base_band: BandT | None
    base_price_usd_cents: int
    surcharge_usd_cents: int
    total_usd_cents: int


def distinct_bands(bands: Iterable[BandT]) -> tuple[BandT, ...]:
    """Collapse duplicates, keeping first-seen order."""
    return tuple(dict.fromkeys(bands))


def compute_shipping(
    bands: Iterable[BandT],
    price_by_band: Mapping[BandT, int],
    surcharge_per_extra_band_usd_cents: int = DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS,
) -> ShippingBreakdown[BandT]:
    """Price a cart's band multiset.

    Args:
        bands: Bands implied by the cart's lines, repeats allowed
        price_by_band: Resolved per-band price table in USD cents
        surcharge_per_extra_band_usd_cents: Fee per distinct band beyond the first

    Returns:
        ShippingBreakdown with base, surcharge and total

    Raises:
        MissingRateError: If any band in the cart has no price
    """
    unique = distinct_bands(bands)
    if not unique:
        return ShippingBreakdown(
            distinct_bands=(),
            base_band=None,
            base_price_usd_cents=0,
            surcharge_usd_cents=0,
            total_usd_cents=0,
        )

    priced: list[tuple[BandT, int]] = []
    for band in unique:
        price = price_by_band.get(band)
        if price is None:
            raise MissingRateError(str(band))
        priced.append((band, price))

    # max() keeps the first band on ties
    base_band, base_price = max(priced, key=lambda item: item[1])
    surcharge = surcharge_per_extra_band_usd_cents * (len(unique) - 1)

    return ShippingBreakdown(
        distinct_bands=unique,
        base_band=base_band,
        base_price_usd_cents=base_price,
        surcharge_usd_cents=surcharge,
        total_usd_cents=base_price + surcharge,
    )
