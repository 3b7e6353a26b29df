"""Product image URL resolution for display."""

from urllib.parse import urlparse

from fastener_catalog.schemas.catalog import CatalogVariant

PLACEHOLDER_IMAGE_HOST = "placehold.co"
PRODUCT_IMAGE_PATH_TEMPLATE = "/images/products/{variant_id}.svg"


def is_placeholder_url(url: str, placeholder_host: str = PLACEHOLDER_IMAGE_HOST) -> bool:
    """True if url is served by the placeholder image host."""
    host = urlparse(url.strip()).hostname
    if host:
        return placeholder_host in host
    return placeholder_host in url


def product_image_url(
    variant: CatalogVariant,
    placeholder_host: str = PLACEHOLDER_IMAGE_HOST,
    template: str = PRODUCT_IMAGE_PATH_TEMPLATE,
) -> str:
    """Return the image URL to display for a variant.

    A real image URL on the variant wins. Missing, blank or placeholder URLs
    fall back to the generated per-variant asset path.
    """
    url = (variant.image_url or "").strip()
    if url and not is_placeholder_url(url, placeholder_host):
        return url
    return template.format(variant_id=variant.id)
