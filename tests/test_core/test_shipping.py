"""Tests for multi-band shipping cost calculation."""

import pytest

from fastener_catalog.core.errors import MissingRateError
from fastener_catalog.core.shipping import compute_shipping, distinct_bands
from fastener_catalog.schemas.shipping import LegacyShippingBand, ShippingBand

A10 = ShippingBand.BAND_A_10PCS
B20 = ShippingBand.BAND_B_20PCS
CBULK = ShippingBand.BAND_C_BULK


@pytest.fixture
def price_by_band() -> dict[ShippingBand, int]:
    return {A10: 1800, B20: 2800, CBULK: 4500}


class TestComputeShipping:
    def test_single_legacy_band(self) -> None:
        out = compute_shipping(
            {LegacyShippingBand.BAND_A},
            {LegacyShippingBand.BAND_A: 1800, LegacyShippingBand.BAND_B: 2800},
        )

        assert out.base_price_usd_cents == 1800
        assert out.surcharge_usd_cents == 0
        assert out.total_usd_cents == 1800
        assert out.base_band is LegacyShippingBand.BAND_A

    def test_two_bands_use_max_plus_surcharge(self) -> None:
        out = compute_shipping([A10, B20], {A10: 1800, B20: 2800})

        assert out.base_price_usd_cents == 2800
        assert out.surcharge_usd_cents == 500
        assert out.total_usd_cents == 3300
        assert out.base_band is B20

    def test_three_bands(self, price_by_band: dict[ShippingBand, int]) -> None:
        out = compute_shipping([CBULK, A10, B20], price_by_band)

        assert out.base_price_usd_cents == 4500
        assert out.surcharge_usd_cents == 1000
        assert out.total_usd_cents == 5500

    def test_empty_cart_is_free(self, price_by_band: dict[ShippingBand, int]) -> None:
        out = compute_shipping([], price_by_band)

        assert out.total_usd_cents == 0
        assert out.base_price_usd_cents == 0
        assert out.surcharge_usd_cents == 0
        assert out.base_band is None
        assert out.distinct_bands == ()

    def test_repeated_bands_do_not_add_surcharge(
        self, price_by_band: dict[ShippingBand, int]
    ) -> None:
        out = compute_shipping([A10, A10, A10], price_by_band)

        assert out.distinct_bands == (A10,)
        assert out.total_usd_cents == 1800

    def test_string_keyed_table(self) -> None:
        out = compute_shipping(["BAND_A", "BAND_B", "BAND_B"], {"BAND_A": 1800, "BAND_B": 2800})

        assert out.total_usd_cents == 3300

    def test_custom_surcharge(self, price_by_band: dict[ShippingBand, int]) -> None:
        out = compute_shipping([A10, B20], price_by_band, surcharge_per_extra_band_usd_cents=250)

        assert out.total_usd_cents == 3050

    def test_tie_keeps_first_band(self) -> None:
        out = compute_shipping([B20, A10], {A10: 2000, B20: 2000})

        assert out.base_band is B20

    def test_missing_rate_raises(self) -> None:
        with pytest.raises(MissingRateError) as exc_info:
            compute_shipping([A10, CBULK], {A10: 1800, B20: 2800})

        assert exc_info.value.band == "BAND_C_BULK"
        assert "BAND_C_BULK" in str(exc_info.value)

    def test_missing_rate_raises_even_when_cheaper(self) -> None:
        with pytest.raises(MissingRateError):
            compute_shipping([B20, A10], {B20: 2800})


class TestDistinctBands:
    def test_first_seen_order(self) -> None:
        assert distinct_bands([B20, A10, B20, CBULK, A10]) == (B20, A10, CBULK)
