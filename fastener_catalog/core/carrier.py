"""Carrier selection over the zone/rule shipping table.

Every carrier whose rules cover all distinct bands of a cart becomes a
candidate priced with compute_shipping. The zone's CarrierPolicy then picks
one: forced DHL above weight/subtotal thresholds, otherwise CHEAPEST,
FASTEST, or DEFAULT (the policy's default carrier, else a zone heuristic).
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from fastener_catalog.core.errors import NoCarrierAvailableError
from fastener_catalog.core.shipping import (
    DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS,
    ShippingBreakdown,
    compute_shipping,
    distinct_bands,
)
from fastener_catalog.infra.logging import get_logger
from fastener_catalog.schemas.shipping import (
    Carrier,
    CarrierPolicy,
    CarrierPolicyType,
    ShippingBand,
    ShippingRule,
)

logger = get_logger(__name__)

ForcedReason = Literal["weight", "subtotal"]


@dataclass(frozen=True)
class CarrierCandidate:
    """A carrier able to ship every band of the cart."""

    carrier: Carrier
    shipping_price_usd_cents: int
    eta_min_days: int
    eta_max_days: int
    tracking_included: bool
    breakdown: ShippingBreakdown[ShippingBand]


@dataclass(frozen=True)
class CarrierSelection:
    """The chosen candidate and why it was chosen."""

    candidate: CarrierCandidate
    applied_policy: CarrierPolicyType
    forced_dhl: bool = False
    forced_reason: ForcedReason | None = None

    @property
    def carrier(self) -> Carrier:
        return self.candidate.carrier

    @property
    def shipping_price_usd_cents(self) -> int:
        return self.candidate.shipping_price_usd_cents


def fallback_carrier_for_zone(zone_name: str) -> Carrier:
    """Preferred carrier when the policy names none."""
    return "DHL" if zone_name == "Oceania" else "JP_POST"


def build_candidates(
    bands: Iterable[ShippingBand],
    rules: Iterable[ShippingRule],
    surcharge_per_extra_band_usd_cents: int = DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS,
) -> list[CarrierCandidate]:
    """Price the cart with every carrier that covers all of its bands.

    Carriers are returned in the order their first rule appears. A carrier
    missing a rule for any required band is skipped.
    """
    required = distinct_bands(bands)
    by_carrier: dict[Carrier, dict[ShippingBand, ShippingRule]] = {}
    for rule in rules:
        by_carrier.setdefault(rule.carrier, {})[rule.band] = rule

    candidates: list[CarrierCandidate] = []
    for carrier, band_rules in by_carrier.items():
        if any(band not in band_rules for band in required):
            continue

        covering = [band_rules[band] for band in required]
        breakdown = compute_shipping(
            required,
            {band: band_rules[band].price_usd_cents for band in required},
            surcharge_per_extra_band_usd_cents,
        )
        candidates.append(
            CarrierCandidate(
                carrier=carrier,
                shipping_price_usd_cents=breakdown.total_usd_cents,
                eta_min_days=max((r.eta_min_days for r in covering), default=0),
                eta_max_days=max((r.eta_max_days for r in covering), default=0),
                tracking_included=all(r.tracking_included for r in covering),
                breakdown=breakdown,
            )
        )
    return candidates


def select_carrier(
    zone_name: str,
    bands: Sequence[ShippingBand],
    subtotal_usd_cents: int,
    weight_kg: float,
    policy: CarrierPolicy | None,
    rules: Sequence[ShippingRule],
    surcharge_per_extra_band_usd_cents: int = DEFAULT_SURCHARGE_PER_EXTRA_BAND_USD_CENTS,
) -> CarrierSelection:
    """Choose the carrier for a cart in one zone.

    Args:
        zone_name: Resolved destination zone
        bands: Bands of the cart's lines, repeats allowed
        subtotal_usd_cents: Cart merchandise subtotal
        weight_kg: Estimated cart weight
        policy: Zone carrier policy; DEFAULT with no thresholds when None
        rules: The zone's rule rows

    Returns:
        CarrierSelection

    Raises:
        NoCarrierAvailableError: If no carrier covers every band
    """
    candidates = build_candidates(bands, rules, surcharge_per_extra_band_usd_cents)
    if not candidates:
        raise NoCarrierAvailableError(f"No shipping rules available for zone={zone_name}")

    policy_type: CarrierPolicyType = policy.policy if policy else "DEFAULT"
    force_weight = policy.force_dhl_over_weight_kg if policy else None
    force_subtotal = policy.force_dhl_over_subtotal_usd_cents if policy else None

    forced_reason: ForcedReason | None = None
    if force_weight is not None and weight_kg > force_weight:
        forced_reason = "weight"
    elif force_subtotal is not None and subtotal_usd_cents > force_subtotal:
        forced_reason = "subtotal"

    if forced_reason is not None:
        dhl = next((c for c in candidates if c.carrier == "DHL"), None)
        if dhl is not None:
            logger.debug("Forcing DHL", zone=zone_name, reason=forced_reason)
            return CarrierSelection(
                candidate=dhl,
                applied_policy=policy_type,
                forced_dhl=True,
                forced_reason=forced_reason,
            )

    if policy_type == "CHEAPEST":
        best = min(candidates, key=lambda c: c.shipping_price_usd_cents)
        return CarrierSelection(candidate=best, applied_policy="CHEAPEST")

    if policy_type == "FASTEST":
        best = min(candidates, key=lambda c: (c.eta_min_days, c.shipping_price_usd_cents))
        return CarrierSelection(candidate=best, applied_policy="FASTEST")

    preferred = (policy.default_carrier if policy else None) or fallback_carrier_for_zone(zone_name)
    direct = next((c for c in candidates if c.carrier == preferred), candidates[0])
    return CarrierSelection(candidate=direct, applied_policy="DEFAULT")
