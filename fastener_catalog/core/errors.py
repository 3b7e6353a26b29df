"""Error types raised by the catalog pipeline and shipping calculators.

All of them are fatal to the operation in progress. Nothing here is retried
and shipping failures are never defaulted to a zero charge.
"""

from dataclasses import dataclass


class CatalogError(Exception):
    """Base class for catalog and shipping errors."""


class ConfigError(CatalogError):
    """Raised when a catalog config is malformed or incomplete."""


class UnknownPackError(ConfigError):
    """Raised when a pack quantity has no band under a schema."""

    def __init__(self, pack_qty: object, schema: str) -> None:
        self.pack_qty = pack_qty
        self.schema = schema
        super().__init__(f"Unknown pack quantity {pack_qty!r} for {schema} shipping bands")


@dataclass(frozen=True)
class ValidationIssue:
    """A single failed catalog check."""

    check: str
    variant_id: str | None
    message: str

    def __str__(self) -> str:
        if self.variant_id is None:
            return f"[{self.check}] {self.message}"
        return f"[{self.check}] id={self.variant_id}: {self.message}"


class CatalogValidationError(CatalogError):
    """Raised when a generated catalog violates one or more invariants.

    Attributes:
        issues: Every failed check, in catalog order
    """

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = list(issues)
        head = "; ".join(str(issue) for issue in self.issues[:5])
        more = len(self.issues) - 5
        suffix = f" (+{more} more)" if more > 0 else ""
        super().__init__(f"Catalog validation failed: {head}{suffix}")

    @property
    def checks(self) -> set[str]:
        """Names of the checks that failed."""
        return {issue.check for issue in self.issues}


class ShippingError(CatalogError):
    """Base class for shipping computation failures."""


class MissingRateError(ShippingError):
    """Raised when a band present in a cart or catalog has no price."""

    def __init__(self, band: str, variant_id: str | None = None) -> None:
        self.band = band
        self.variant_id = variant_id
        message = f"Missing shipping rate for band {band}"
        if variant_id is not None:
            message += f" (used by {variant_id})"
        super().__init__(message)


class NoCarrierAvailableError(ShippingError):
    """Raised when no carrier has rules covering every band of a cart."""


class UnknownVariantError(ShippingError):
    """Raised when a cart line references a variant not in the catalog."""

    def __init__(self, variant_id: str) -> None:
        self.variant_id = variant_id
        super().__init__(f"Unknown variant: {variant_id}")
