"""Command line entry point for the build-time catalog pipeline.

Usage:
    # Generate the catalog from the default config into the default output
    fastener-catalog generate

    # Explicit config and output paths
    fastener-catalog generate data/catalog.config.json data/catalog.generated.json

    # Validate a generated catalog, and check it against the current rate table
    fastener-catalog validate data/catalog.generated.json --rates data/shipping_rates.json
"""

import argparse
import sys
from collections.abc import Sequence

from fastener_catalog.config import settings
from fastener_catalog.core.errors import CatalogError
from fastener_catalog.core.generator import generate_catalog
from fastener_catalog.core.rates import assert_rate_coverage
from fastener_catalog.core.validator import validate_catalog
from fastener_catalog.infra.logging import get_logger, setup_logging
from fastener_catalog.infra.storage import (
    load_catalog,
    load_catalog_config,
    load_price_table,
    write_catalog,
)
from fastener_catalog.schemas.shipping import ShippingSchema

logger = get_logger(__name__)


def cmd_generate(args: argparse.Namespace) -> int:
    config = load_catalog_config(args.config_path)
    variants = generate_catalog(config)
    out_path = write_catalog(variants, args.out_path)
    print(f"OK: generated {len(variants)} variants -> {out_path}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    variants = load_catalog(args.catalog_path)
    validate_catalog(variants)

    if args.rates:
        schema = ShippingSchema(args.schema)
        table = load_price_table(schema, args.rates)
        assert_rate_coverage(variants, table, schema)

    print(f"OK: {len(variants)} variants validated.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastener-catalog",
        description="Generate and validate the JIS fastener catalog",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate the catalog from a config")
    generate.add_argument(
        "config_path",
        nargs="?",
        default=None,
        help=f"Catalog config (default: {settings.catalog_config_path})",
    )
    generate.add_argument(
        "out_path",
        nargs="?",
        default=None,
        help=f"Output file (default: {settings.catalog_output_path})",
    )
    generate.set_defaults(handler=cmd_generate)

    validate = subparsers.add_parser("validate", help="Validate a generated catalog")
    validate.add_argument(
        "catalog_path",
        nargs="?",
        default=None,
        help=f"Generated catalog (default: {settings.catalog_output_path})",
    )
    validate.add_argument(
        "--rates",
        default=None,
        help="Rates file; when given, every variant's band must be priced",
    )
    validate.add_argument(
        "--schema",
        choices=[schema.value for schema in ShippingSchema],
        default=ShippingSchema.CURRENT.value,
        help="Price-table schema checked with --rates (default: current)",
    )
    validate.set_defaults(handler=cmd_validate)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Process exit code: 0 on success, 1 on any catalog or shipping error
    """
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        return args.handler(args)
    except CatalogError as e:
        logger.error("Command failed", command=args.command, error_type=type(e).__name__)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
