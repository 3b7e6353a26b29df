"""Destination zone resolution."""

from collections.abc import Iterable

from fastener_catalog.schemas.shipping import ShippingZone

FALLBACK_ZONE_NAME = "Other"


def normalize_country_code(code: str) -> str:
    return code.strip().upper()


def resolve_zone(
    country_code: str,
    zones: Iterable[ShippingZone],
    fallback_zone_name: str = FALLBACK_ZONE_NAME,
) -> ShippingZone | None:
    """Find the active zone for a destination country.

    Args:
        country_code: ISO country code, any case or padding
        zones: Configured zones
        fallback_zone_name: Zone used when no zone lists the country

    Returns:
        The zone listing the country, else the active fallback zone, else None
    """
    cc = normalize_country_code(country_code)
    active = [zone for zone in zones if zone.is_active]

    for zone in active:
        if any(normalize_country_code(c) == cc for c in zone.countries):
            return zone

    for zone in active:
        if zone.name == fallback_zone_name:
            return zone
    return None
