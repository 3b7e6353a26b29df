"""Core module - catalog generation, validation, banding and shipping cost."""

from fastener_catalog.core.bands import (
    band_for_pack_qty,
    legacy_band_for_pack_qty,
    resolve_band,
)
from fastener_catalog.core.catalog_index import CatalogIndex
from fastener_catalog.core.errors import (
    CatalogError,
    CatalogValidationError,
    ConfigError,
    MissingRateError,
    NoCarrierAvailableError,
    ShippingError,
    UnknownPackError,
    UnknownVariantError,
    ValidationIssue,
)
from fastener_catalog.core.generator import generate_catalog
from fastener_catalog.core.shipping import ShippingBreakdown, compute_shipping
from fastener_catalog.core.validator import validate_catalog

__all__ = [
    "CatalogError",
    "CatalogIndex",
    "CatalogValidationError",
    "ConfigError",
    "MissingRateError",
    "NoCarrierAvailableError",
    "ShippingBreakdown",
    "ShippingError",
    "UnknownPackError",
    "UnknownVariantError",
    "ValidationIssue",
    "band_for_pack_qty",
    "compute_shipping",
    "generate_catalog",
    "legacy_band_for_pack_qty",
    "resolve_band",
    "validate_catalog",
]
