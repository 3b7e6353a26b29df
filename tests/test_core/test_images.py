"""Tests for product image URL resolution."""

import pytest

from fastener_catalog.core.images import is_placeholder_url, product_image_url
from fastener_catalog.schemas.catalog import CatalogVariant


def _variant(image_url: str | None) -> CatalogVariant:
    return CatalogVariant(
        id="bolt-hex-m6-12-10pcs",
        family="bolt-hex",
        category="bolt",
        pack_qty=10,
        price_usd_cents=500,
        image_url=image_url,
    )


class TestIsPlaceholderUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://placehold.co/600x400?text=M6",
            "http://placehold.co/100",
            "placehold.co/100",
        ],
    )
    def test_placeholder(self, url: str) -> None:
        assert is_placeholder_url(url) is True

    def test_real_host(self) -> None:
        assert is_placeholder_url("https://cdn.example.com/bolt.jpg") is False

    def test_custom_host(self) -> None:
        assert is_placeholder_url("https://dummyimage.com/1", "dummyimage.com") is True


class TestProductImageUrl:
    def test_real_url_wins(self) -> None:
        variant = _variant("https://cdn.example.com/bolt.jpg")

        assert product_image_url(variant) == "https://cdn.example.com/bolt.jpg"

    @pytest.mark.parametrize("url", [None, "", "   ", "https://placehold.co/600x400"])
    def test_fallback_path(self, url: str | None) -> None:
        assert product_image_url(_variant(url)) == "/images/products/bolt-hex-m6-12-10pcs.svg"

    def test_custom_template(self) -> None:
        out = product_image_url(_variant(None), template="/static/{variant_id}.png")

        assert out == "/static/bolt-hex-m6-12-10pcs.png"
