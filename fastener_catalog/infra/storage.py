"""Local file storage for catalog configs, generated catalogs and rate tables.

Provides:
- Catalog config loading (JSON, or YAML by file suffix)
- Validated, atomic writes of the generated catalog
- Generated catalog loading with per-entry structural checks
- Flat shipping price tables
"""

import json
import os
import tempfile
from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fastener_catalog.config import settings
from fastener_catalog.core.errors import (
    CatalogValidationError,
    ConfigError,
    ValidationIssue,
)
from fastener_catalog.core.rates import parse_price_table
from fastener_catalog.core.validator import validate_catalog
from fastener_catalog.infra.logging import get_logger
from fastener_catalog.schemas.catalog import CatalogVariant
from fastener_catalog.schemas.catalog_config import CatalogConfig
from fastener_catalog.schemas.shipping import (
    LegacyShippingBand,
    ShippingBand,
    ShippingSchema,
)

logger = get_logger(__name__)

CHECK_SCHEMA = "schema"
YAML_SUFFIXES = {".yaml", ".yml"}


def _read_structured(path: Path) -> Any:
    """Read a JSON or YAML document, raising ConfigError on any failure."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(raw)
        return json.loads(raw, parse_float=Decimal)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Malformed {path}: {e}") from e


def load_catalog_config(path: str | Path | None = None) -> CatalogConfig:
    """Load a catalog config.

    Args:
        path: Config file. Defaults to settings.catalog_config_path.

    Returns:
        Parsed CatalogConfig

    Raises:
        ConfigError: If the file is missing, malformed, or fails the schema
    """
    config_path = Path(path or settings.catalog_config_path)
    data = _read_structured(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"Catalog config root must be an object: {config_path}")

    try:
        config = CatalogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid catalog config {config_path}: {e}") from e

    logger.info(
        "Catalog config loaded",
        path=str(config_path),
        families=[family.id for family in config.families],
    )
    return config


def serialize_catalog(variants: Sequence[CatalogVariant]) -> str:
    """Render a catalog as the artifact text (stable, byte-identical for equal input)."""
    payload = [variant.model_dump(mode="json") for variant in variants]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_catalog(
    variants: Sequence[CatalogVariant],
    path: str | Path | None = None,
) -> Path:
    """Validate and write the generated catalog, replacing any previous one.

    The file is written to a temporary sibling and renamed over the target,
    so readers see either the previous or the new generation.

    Args:
        variants: Catalog to persist
        path: Output file. Defaults to settings.catalog_output_path.

    Returns:
        Path written

    Raises:
        CatalogValidationError: If the catalog is invalid; nothing is written
    """
    validate_catalog(variants)

    out_path = Path(path or settings.catalog_output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    content = serialize_catalog(variants)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{out_path.name}.", suffix=".tmp", dir=out_path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, out_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info("Catalog written", path=str(out_path), variant_count=len(variants))
    return out_path


def load_catalog(path: str | Path | None = None) -> list[CatalogVariant]:
    """Load a generated catalog artifact.

    Entries are decoded individually; structural failures are collected and
    reported together. Invariant checks are left to validate_catalog.

    Args:
        path: Catalog file. Defaults to settings.catalog_output_path.

    Raises:
        ConfigError: If the file cannot be read or is not JSON
        CatalogValidationError: If the root is not a list or an entry is malformed
    """
    catalog_path = Path(path or settings.catalog_output_path)
    data = _read_structured(catalog_path)
    if not isinstance(data, list):
        raise CatalogValidationError(
            [ValidationIssue(CHECK_SCHEMA, None, "catalog json root must be an array")]
        )

    variants: list[CatalogVariant] = []
    issues: list[ValidationIssue] = []
    for idx, entry in enumerate(data):
        try:
            variants.append(CatalogVariant.model_validate(entry))
        except ValidationError as e:
            vid = entry.get("id") if isinstance(entry, dict) else None
            label = vid if isinstance(vid, str) else None
            issues.append(
                ValidationIssue(
                    CHECK_SCHEMA,
                    label,
                    f"entry {idx}: {e.error_count()} field error(s): "
                    + "; ".join(
                        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                        for err in e.errors()
                    ),
                )
            )

    if issues:
        raise CatalogValidationError(issues)

    logger.debug("Catalog loaded", path=str(catalog_path), variant_count=len(variants))
    return variants


def load_price_table(
    schema: ShippingSchema,
    path: str | Path | None = None,
) -> dict[LegacyShippingBand, int] | dict[ShippingBand, int]:
    """Load one flat price table from a rates file.

    The file holds one {"BAND_...": cents} object per schema:
    {"legacy": {...}, "current": {...}}.

    Raises:
        ConfigError: If the file or the schema's table is missing or malformed
    """
    rates_path = Path(path or settings.shipping_rates_path)
    data = _read_structured(rates_path)
    if not isinstance(data, dict) or not isinstance(data.get(schema.value), dict):
        raise ConfigError(f"No {schema.value} price table in {rates_path}")
    return parse_price_table(data[schema.value], schema)
