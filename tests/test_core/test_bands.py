"""Tests for shipping band resolution."""

import pytest

from fastener_catalog.core.bands import (
    PACK_QUANTITIES,
    band_for_pack_qty,
    is_known_pack_qty,
    legacy_band_for_pack_qty,
    resolve_band,
)
from fastener_catalog.core.errors import ConfigError, UnknownPackError
from fastener_catalog.schemas.shipping import (
    LegacyShippingBand,
    ShippingBand,
    ShippingSchema,
)


class TestLegacyBands:
    @pytest.mark.parametrize(
        "pack_qty, band",
        [
            (10, LegacyShippingBand.BAND_A),
            (20, LegacyShippingBand.BAND_B),
            (50, LegacyShippingBand.BAND_B),
            (100, LegacyShippingBand.BAND_B),
        ],
    )
    def test_mapping(self, pack_qty: int, band: LegacyShippingBand) -> None:
        assert legacy_band_for_pack_qty(pack_qty) is band

    def test_unknown_pack_fails_loudly(self) -> None:
        with pytest.raises(UnknownPackError, match="legacy"):
            legacy_band_for_pack_qty(30)


class TestCurrentBands:
    @pytest.mark.parametrize(
        "pack_qty, band",
        [
            (10, ShippingBand.BAND_A_10PCS),
            (20, ShippingBand.BAND_B_20PCS),
            (50, ShippingBand.BAND_C_BULK),
            (100, ShippingBand.BAND_C_BULK),
        ],
    )
    def test_mapping(self, pack_qty: int, band: ShippingBand) -> None:
        assert band_for_pack_qty(pack_qty) is band

    def test_unknown_pack_is_a_config_error(self) -> None:
        with pytest.raises(ConfigError):
            band_for_pack_qty(0)

    def test_unhashable_pack_fails_loudly(self) -> None:
        with pytest.raises(UnknownPackError):
            band_for_pack_qty([10])  # type: ignore[arg-type]


class TestResolveBand:
    def test_dispatches_on_schema(self) -> None:
        assert resolve_band(20, ShippingSchema.LEGACY) is LegacyShippingBand.BAND_B
        assert resolve_band(20, ShippingSchema.CURRENT) is ShippingBand.BAND_B_20PCS

    @pytest.mark.parametrize("schema", list(ShippingSchema))
    def test_total_over_known_pack_quantities(self, schema: ShippingSchema) -> None:
        for qty in PACK_QUANTITIES:
            assert resolve_band(qty, schema) is not None

    def test_band_renders_as_its_tag(self) -> None:
        assert str(ShippingBand.BAND_C_BULK) == "BAND_C_BULK"
        assert f"{LegacyShippingBand.BAND_A}" == "BAND_A"


class TestKnownPackQty:
    def test_known(self) -> None:
        assert PACK_QUANTITIES == (10, 20, 50, 100)
        assert all(is_known_pack_qty(qty) for qty in PACK_QUANTITIES)

    @pytest.mark.parametrize("value", [0, 30, "10", True, None])
    def test_unknown(self, value: object) -> None:
        assert is_known_pack_qty(value) is False
