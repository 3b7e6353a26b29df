"""Catalog generator - expands a CatalogConfig into sellable variants.

Each product family becomes one variant per combination of its axis values
and pack options (packs innermost). A dependent axis (bolt length per size)
narrows the values offered per combination. Every family named as an
alternate must offer each combination of the families pointing at it. Ids, prices and ordering are derived
only from the config, so regenerating an unchanged config reproduces the
previous catalog exactly and carts placed against it stay resolvable.

Prices are computed in Decimal and rounded half-up (ROUND_HALF_UP) to the
config's rounding unit: whole cents, or whole dollars when
``price_rounding`` is "dollar". A price never rounds below one unit.
"""

from decimal import ROUND_HALF_UP, Decimal

from fastener_catalog.core.bands import PACK_QUANTITIES, is_known_pack_qty
from fastener_catalog.core.errors import ConfigError
from fastener_catalog.core.images import is_placeholder_url
from fastener_catalog.core.slugs import is_slug_safe, slugify
from fastener_catalog.infra.logging import get_logger
from fastener_catalog.schemas.catalog import CatalogVariant
from fastener_catalog.schemas.catalog_config import (
    Axis,
    AxisValue,
    CatalogConfig,
    PackOption,
    ProductFamily,
)

logger = get_logger(__name__)

REFERENCE_PACK_QTY = 10
_PACK_MULTIPLIER_QUANTUM = Decimal("0.0001")
_ROUNDING_UNIT_CENTS = {"cent": Decimal(1), "dollar": Decimal(100)}


def generate_catalog(config: CatalogConfig) -> list[CatalogVariant]:
    """Generate the full ordered variant list for a config.

    Args:
        config: Catalog authoring config

    Returns:
        Variants grouped by family (config order), then by axis combination

    Raises:
        ConfigError: If the config is empty, inconsistent, or yields
            duplicate ids. Nothing is returned in that case.
    """
    _check_config(config)

    variants: list[CatalogVariant] = []
    for family in config.families:
        variants.extend(_expand_family(config, family))

    if config.target_count is not None:
        variants = variants[: config.target_count]
        # Alternates cut off by the cap are dropped, not left dangling.
        kept = {variant.id for variant in variants}
        variants = [
            variant
            if variant.alternate_id is None or variant.alternate_id in kept
            else variant.model_copy(update={"alternate_id": None})
            for variant in variants
        ]

    seen: set[str] = set()
    for variant in variants:
        if variant.id in seen:
            raise ConfigError(f"Duplicate variant id generated: {variant.id}")
        seen.add(variant.id)

    logger.debug(
        "Catalog variants generated",
        families=len(config.families),
        variant_count=len(variants),
    )
    return variants


def build_variant_id(family_id: str, slugs: tuple[str, ...], pack_qty: int) -> str:
    """Derive a variant id from its family and axis combination."""
    return "-".join((family_id, *slugs, f"{pack_qty}pcs"))


def axis_value_slug(value: AxisValue) -> str:
    """Id fragment of an axis value: its explicit slug or the slugified value."""
    return value.slug if value.slug is not None else slugify(value.value)


def pack_multiplier(pack: PackOption, exponent: Decimal) -> Decimal:
    """Price multiplier of a pack relative to a pack of 10.

    Bigger packs cost less than linear: (qty / 10) ** exponent, rounded to
    four places, unless the pack declares its own multiplier.
    """
    if pack.multiplier is not None:
        return pack.multiplier
    ratio = Decimal(pack.qty) / Decimal(REFERENCE_PACK_QTY)
    return (ratio**exponent).quantize(_PACK_MULTIPLIER_QUANTUM, rounding=ROUND_HALF_UP)


def round_price(raw_cents: Decimal, rounding: str) -> int:
    """Round a raw price half-up to the rounding unit, floored at one unit."""
    unit = _ROUNDING_UNIT_CENTS[rounding]
    units = (raw_cents / unit).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(max(units, Decimal(1)) * unit)


def axis_combinations(family: ProductFamily) -> list[tuple[AxisValue, ...]]:
    """Expand a family's axes into value combinations, in declaration order.

    Independent axes multiply out like a Cartesian product. A dependent axis
    contributes the values offered for the combination's value of its parent.
    """
    positions = {axis.name: idx for idx, axis in enumerate(family.axes)}
    combos: list[tuple[AxisValue, ...]] = [()]
    for axis in family.axes:
        expanded: list[tuple[AxisValue, ...]] = []
        for combo in combos:
            parent = combo[positions[axis.depends_on]].value if axis.depends_on else None
            expanded.extend((*combo, value) for value in axis.values_for(parent))
        combos = expanded
    return combos


def _expand_family(config: CatalogConfig, family: ProductFamily) -> list[CatalogVariant]:
    image_url = family.image_url
    if image_url is not None and (not image_url.strip() or is_placeholder_url(image_url)):
        image_url = None

    axis_names = [axis.name for axis in family.axes]

    out: list[CatalogVariant] = []
    for combo in axis_combinations(family):
        slugs = tuple(axis_value_slug(v) for v in combo)
        attributes = {name: v.value for name, v in zip(axis_names, combo)}
        axis_multiplier = Decimal(1)
        for v in combo:
            axis_multiplier *= v.multiplier

        for pack in family.packs:
            raw = (
                Decimal(family.base_price_usd_cents)
                * axis_multiplier
                * pack_multiplier(pack, config.pack_exponent)
            )
            alternate_id = (
                build_variant_id(family.alternate_family, slugs, pack.qty)
                if family.alternate_family
                else None
            )
            out.append(
                CatalogVariant(
                    id=build_variant_id(family.id, slugs, pack.qty),
                    family=family.id,
                    category=family.category,
                    standard=config.standard,
                    attributes=attributes,
                    pack_qty=pack.qty,
                    price_usd_cents=round_price(raw, config.price_rounding),
                    image_url=image_url,
                    alternate_id=alternate_id,
                )
            )
    return out


def _variant_keys(family: ProductFamily) -> list[tuple[tuple[str, ...], int]]:
    """(axis slugs, pack qty) of every variant a family yields, in order."""
    return [
        (tuple(axis_value_slug(v) for v in combo), pack.qty)
        for combo in axis_combinations(family)
        for pack in family.packs
    ]


def _check_config(config: CatalogConfig) -> None:
    """Reject configs that cannot yield a complete, consistent catalog."""
    if not config.families:
        raise ConfigError("Catalog config must name at least one product family")
    if config.pack_exponent <= 0:
        raise ConfigError(f"pack_exponent must be > 0, got {config.pack_exponent}")

    family_ids = [family.id for family in config.families]
    duplicates = sorted({fid for fid in family_ids if family_ids.count(fid) > 1})
    if duplicates:
        raise ConfigError(f"Duplicate product family ids: {duplicates}")

    for family in config.families:
        _check_family(family, set(family_ids))

    by_id = {family.id: family for family in config.families}
    for family in config.families:
        if family.alternate_family is not None:
            _check_alternate_coverage(family, by_id[family.alternate_family])


def _check_alternate_coverage(family: ProductFamily, alternate: ProductFamily) -> None:
    """Every variant of family must have a same-combination variant in alternate."""
    offered = set(_variant_keys(alternate))
    for slugs, qty in _variant_keys(family):
        if (slugs, qty) not in offered:
            missing = build_variant_id(alternate.id, slugs, qty)
            raise ConfigError(
                f"family={family.id} alternate_family {alternate.id!r} "
                f"does not offer {missing}"
            )


def _check_values(fid: str, axis: Axis, values: list[AxisValue], label: str) -> None:
    if not values:
        raise ConfigError(f"family={fid} axis {axis.name!r} has no values{label}")
    slugs = [axis_value_slug(v) for v in values]
    for value, slug in zip(values, slugs):
        if not slug or not is_slug_safe(slug):
            raise ConfigError(
                f"family={fid} axis {axis.name!r} value {value.value!r} "
                f"has no slug-safe id fragment ({slug!r})"
            )
        if slugs.count(slug) > 1:
            raise ConfigError(
                f"family={fid} axis {axis.name!r} duplicate value slug {slug!r}{label}"
            )
        if value.multiplier <= 0:
            raise ConfigError(
                f"family={fid} axis {axis.name!r} value {value.value!r} multiplier must be > 0"
            )


def _check_axes(fid: str, axes: list[Axis]) -> None:
    axis_names = [axis.name for axis in axes]
    if len(set(axis_names)) != len(axis_names):
        raise ConfigError(f"family={fid} duplicate axis names: {axis_names}")

    earlier: dict[str, Axis] = {}
    for axis in axes:
        if axis.depends_on is None:
            _check_values(fid, axis, axis.values, "")
            earlier[axis.name] = axis
            continue

        parent = earlier.get(axis.depends_on)
        if parent is None:
            raise ConfigError(
                f"family={fid} axis {axis.name!r} depends on {axis.depends_on!r}, "
                "which is not an earlier axis"
            )
        if parent.depends_on is not None:
            raise ConfigError(
                f"family={fid} axis {axis.name!r} depends on dependent axis {parent.name!r}"
            )
        parent_values = {v.value for v in parent.values}
        unknown = sorted(set(axis.values_by) - parent_values)
        if unknown:
            raise ConfigError(
                f"family={fid} axis {axis.name!r} values_by names unknown "
                f"{parent.name} values: {unknown}"
            )
        for parent_value in parent.values:
            _check_values(
                fid,
                axis,
                axis.values_for(parent_value.value),
                f" for {parent.name}={parent_value.value}",
            )
        earlier[axis.name] = axis


def _check_family(family: ProductFamily, family_ids: set[str]) -> None:
    fid = family.id
    if not is_slug_safe(fid):
        raise ConfigError(f"Family id is not slug-safe: {fid!r}")
    if family.base_price_usd_cents <= 0:
        raise ConfigError(f"family={fid} base_price_usd_cents must be > 0")

    if not family.packs:
        raise ConfigError(f"family={fid} must define at least one pack quantity")
    qtys = [pack.qty for pack in family.packs]
    for pack in family.packs:
        if not is_known_pack_qty(pack.qty):
            raise ConfigError(
                f"family={fid} unsupported pack quantity {pack.qty}; "
                f"expected one of {list(PACK_QUANTITIES)}"
            )
        if qtys.count(pack.qty) > 1:
            raise ConfigError(f"family={fid} duplicate pack quantity {pack.qty}")
        if pack.multiplier is not None and pack.multiplier <= 0:
            raise ConfigError(f"family={fid} pack {pack.qty} multiplier must be > 0")

    _check_axes(fid, family.axes)

    if family.alternate_family is not None:
        if family.alternate_family == fid:
            raise ConfigError(f"family={fid} cannot be its own alternate")
        if family.alternate_family not in family_ids:
            raise ConfigError(
                f"family={fid} alternate_family {family.alternate_family!r} is not defined"
            )
