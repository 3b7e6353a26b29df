"""Catalog validator - structural and business invariants over a catalog.

Runs every check over the whole sequence and raises a single
CatalogValidationError listing each failure with its check name and variant
id, in catalog order. The input is never modified.
"""

from collections.abc import Sequence

from fastener_catalog.core.bands import PACK_QUANTITIES, is_known_pack_qty
from fastener_catalog.core.errors import CatalogValidationError, ValidationIssue
from fastener_catalog.core.slugs import is_slug_safe
from fastener_catalog.infra.logging import get_logger
from fastener_catalog.schemas.catalog import CatalogVariant

logger = get_logger(__name__)

CHECK_NON_EMPTY = "non_empty"
CHECK_UNIQUE_ID = "unique_id"
CHECK_SLUG_SAFE_ID = "slug_safe_id"
CHECK_POSITIVE_PRICE = "positive_price"
CHECK_KNOWN_PACK = "known_pack"
CHECK_STANDARD = "standard"
CHECK_FAMILY_ATTRIBUTES = "family_attributes"
CHECK_ALTERNATE_EXISTS = "alternate_exists"

EXPECTED_STANDARD = "JIS"


def validate_catalog(variants: Sequence[CatalogVariant]) -> None:
    """Validate a generated catalog.

    Args:
        variants: Catalog to check

    Raises:
        CatalogValidationError: If any invariant fails
    """
    issues = collect_issues(variants)
    if issues:
        logger.warning(
            "Catalog validation failed",
            issue_count=len(issues),
            checks=sorted({issue.check for issue in issues}),
        )
        raise CatalogValidationError(issues)


def collect_issues(variants: Sequence[CatalogVariant]) -> list[ValidationIssue]:
    """Run every check and return the failures without raising."""
    if not variants:
        return [ValidationIssue(CHECK_NON_EMPTY, None, "catalog must not be empty")]

    issues: list[ValidationIssue] = []
    ids = {variant.id for variant in variants}
    seen: set[str] = set()
    family_shape: dict[str, tuple[str, frozenset[str]]] = {}

    for variant in variants:
        vid = variant.id

        if vid in seen:
            issues.append(ValidationIssue(CHECK_UNIQUE_ID, vid, "duplicate id"))
        seen.add(vid)

        if not is_slug_safe(vid):
            issues.append(ValidationIssue(CHECK_SLUG_SAFE_ID, vid, "id is not slug-safe"))

        price = variant.price_usd_cents
        if isinstance(price, bool) or not isinstance(price, int) or price <= 0:
            issues.append(
                ValidationIssue(
                    CHECK_POSITIVE_PRICE,
                    vid,
                    f"price_usd_cents must be a positive integer, got {price!r}",
                )
            )

        if not is_known_pack_qty(variant.pack_qty):
            issues.append(
                ValidationIssue(
                    CHECK_KNOWN_PACK,
                    vid,
                    f"pack_qty {variant.pack_qty!r} not in {list(PACK_QUANTITIES)}",
                )
            )

        if variant.standard != EXPECTED_STANDARD:
            issues.append(
                ValidationIssue(
                    CHECK_STANDARD,
                    vid,
                    f"standard must be {EXPECTED_STANDARD!r}, got {variant.standard!r}",
                )
            )

        # Variants of one family share category and attribute keys.
        expected = family_shape.setdefault(
            variant.family, (variant.category, frozenset(variant.attributes))
        )
        if variant.category != expected[0]:
            issues.append(
                ValidationIssue(
                    CHECK_FAMILY_ATTRIBUTES,
                    vid,
                    f"category {variant.category!r} differs from family "
                    f"{variant.family!r} ({expected[0]!r})",
                )
            )
        elif frozenset(variant.attributes) != expected[1]:
            issues.append(
                ValidationIssue(
                    CHECK_FAMILY_ATTRIBUTES,
                    vid,
                    f"attributes {sorted(variant.attributes)} differ from family "
                    f"{variant.family!r} {sorted(expected[1])}",
                )
            )

        alternate = variant.alternate_id
        if alternate is not None:
            if alternate == vid:
                issues.append(
                    ValidationIssue(CHECK_ALTERNATE_EXISTS, vid, "alternate_id points at itself")
                )
            elif alternate not in ids:
                issues.append(
                    ValidationIssue(
                        CHECK_ALTERNATE_EXISTS,
                        vid,
                        f"alternate_id {alternate!r} is not in the catalog",
                    )
                )

    return issues
