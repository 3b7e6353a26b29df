"""Shipping bands and the price-table rows they are priced by.

Two schemas coexist:
- legacy: one flat ShippingRate row per LegacyShippingBand
- current: ShippingRule rows scoped by zone and carrier, plus a
  CarrierPolicy per zone

Both are flattened to a band -> cents mapping before pricing a cart.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Band(str, Enum):
    def __str__(self) -> str:
        return self.value


class LegacyShippingBand(_Band):
    """Legacy two-band classification."""

    BAND_A = "BAND_A"
    BAND_B = "BAND_B"


class ShippingBand(_Band):
    """Current rule-table classification."""

    BAND_A_10PCS = "BAND_A_10PCS"
    BAND_B_20PCS = "BAND_B_20PCS"
    BAND_C_BULK = "BAND_C_BULK"


class ShippingSchema(str, Enum):
    """Which price-table schema is active."""

    LEGACY = "legacy"
    CURRENT = "current"


Carrier = Literal["JP_POST", "DHL"]
CarrierPolicyType = Literal["DEFAULT", "CHEAPEST", "FASTEST"]


class ShippingRate(BaseModel):
    """Legacy flat rate row."""

    band: LegacyShippingBand
    amount_usd_cents: int = Field(ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")


class ShippingRule(BaseModel):
    """Zone/carrier scoped rate row of the current schema."""

    zone: str = Field(min_length=1, description="Zone name the rule applies to")
    band: ShippingBand
    carrier: Carrier
    price_usd_cents: int = Field(ge=0)
    eta_min_days: int = Field(ge=0)
    eta_max_days: int = Field(ge=0)
    tracking_included: bool = True
    notes: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class CarrierPolicy(BaseModel):
    """Per-zone carrier selection policy."""

    zone: str = Field(min_length=1)
    policy: CarrierPolicyType = "DEFAULT"
    default_carrier: Carrier | None = None
    force_dhl_over_weight_kg: float | None = None
    force_dhl_over_subtotal_usd_cents: int | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class ShippingZone(BaseModel):
    """Named group of destination country codes."""

    name: str = Field(min_length=1)
    countries: tuple[str, ...] = ()
    is_active: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")


class CartLine(BaseModel):
    """A cart line as submitted at checkout."""

    variant_id: str = Field(min_length=1)
    quantity: int = Field(gt=0)

    model_config = ConfigDict(frozen=True, extra="forbid")


__all__ = [
    "Carrier",
    "CarrierPolicy",
    "CarrierPolicyType",
    "CartLine",
    "LegacyShippingBand",
    "ShippingBand",
    "ShippingRate",
    "ShippingRule",
    "ShippingSchema",
    "ShippingZone",
]
