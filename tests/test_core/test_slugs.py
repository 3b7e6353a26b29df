"""Tests for slug helpers."""

import pytest

from fastener_catalog.core.slugs import is_slug_safe, slugify


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("M6", "m6"),
        ("M8x1.25", "m8x1-25"),
        (" Stainless Steel ", "stainless-steel"),
        ("10.9", "10-9"),
        ("--zinc--", "zinc"),
        ("???", ""),
    ],
)
def test_slugify(raw: str, expected: str) -> None:
    assert slugify(raw) == expected


@pytest.mark.parametrize(
    "value",
    ["m6", "bolt-hex-m6-12-10pcs", "nut-hex-m8x1-25-zinc-100pcs", "a"],
)
def test_slug_safe(value: str) -> None:
    assert is_slug_safe(value) is True


@pytest.mark.parametrize(
    "value",
    ["", "M6", "-m6", "m6-", "m6 zinc", "m6_zinc", "m6\n", "nut/hex"],
)
def test_not_slug_safe(value: str) -> None:
    assert is_slug_safe(value) is False
