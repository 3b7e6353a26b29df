"""Pydantic schemas for catalog configs, variants and shipping tables."""

from fastener_catalog.schemas.catalog import CatalogVariant
from fastener_catalog.schemas.catalog_config import (
    Axis,
    AxisValue,
    CatalogConfig,
    PackOption,
    ProductFamily,
)
from fastener_catalog.schemas.shipping import (
    CarrierPolicy,
    CartLine,
    LegacyShippingBand,
    ShippingBand,
    ShippingRate,
    ShippingRule,
    ShippingSchema,
    ShippingZone,
)

__all__ = [
    "Axis",
    "AxisValue",
    "CatalogConfig",
    "CatalogVariant",
    "CarrierPolicy",
    "CartLine",
    "LegacyShippingBand",
    "PackOption",
    "ProductFamily",
    "ShippingBand",
    "ShippingRate",
    "ShippingRule",
    "ShippingSchema",
    "ShippingZone",
]
