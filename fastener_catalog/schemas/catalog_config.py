"""Pydantic schemas for the catalog authoring config.

A config names product families; each family declares ordered axes (size,
length, strength class, finish, ...) and the pack quantities it is sold in.
The generator expands every family into the Cartesian product of its axis
values and pack options.

Example JSON:
    {
        "standard": "JIS",
        "price_rounding": "dollar",
        "families": [
            {
                "id": "nut-hex",
                "name": "JIS Hex Nut",
                "category": "nut",
                "base_price_usd_cents": 380,
                "axes": [
                    {"name": "size", "values": [{"value": "M6", "multiplier": 1.0}]},
                    {"name": "finish", "values": ["zinc", "stainless"]}
                ],
                "packs": [10, 20, {"qty": 100, "multiplier": 7.5}]
            }
        ]
    }

Semantic checks (duplicate ids, unsupported pack quantities, unknown
alternate families, ...) are done by the generator so that a config built
in code gets the same treatment as one loaded from disk.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Category = Literal["bolt", "nut", "washer"]


class AxisValue(BaseModel):
    """One value of a family axis.

    Attributes:
        value: Display value stored on the variant (e.g. "M6", "20", "zinc")
        slug: Optional id fragment; derived from value when omitted
        multiplier: Price multiplier applied when this value is selected
    """

    value: str = Field(min_length=1)
    slug: str | None = None
    multiplier: Decimal = Decimal("1")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def expand_shorthand(cls, data: Any) -> Any:
        """Accept a bare scalar as shorthand for {"value": scalar}."""
        if isinstance(data, (str, int, float, Decimal)) and not isinstance(data, bool):
            return {"value": data}
        return data

    @field_validator("value", mode="before")
    @classmethod
    def stringify_value(cls, v: Any) -> Any:
        """Numeric axis values (lengths in mm) are stored as strings."""
        if isinstance(v, (int, Decimal)) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, float):
            return str(int(v)) if v.is_integer() else str(v)
        return v


class Axis(BaseModel):
    """An ordered product axis, e.g. size or finish.

    An axis may depend on an earlier axis: ``values_by`` then maps a value of
    the ``depends_on`` axis to the values offered with it (bolt lengths per
    size). Parent values without an entry are offered ``values``.

    Example JSON:
        {
            "name": "length",
            "depends_on": "size",
            "values": [10, 12, 16],
            "values_by": {"M10": [20, 25, 30]}
        }
    """

    name: str = Field(min_length=1)
    values: list[AxisValue] = Field(default_factory=list)
    depends_on: str | None = None
    values_by: dict[str, list[AxisValue]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def check_dependency(self) -> Axis:
        if self.values_by and self.depends_on is None:
            raise ValueError(f"axis {self.name!r} has values_by but no depends_on")
        return self

    def values_for(self, parent_value: str | None) -> list[AxisValue]:
        """Values offered alongside the given value of the depends_on axis."""
        if self.depends_on is not None and parent_value in self.values_by:
            return self.values_by[parent_value]
        return self.values


class PackOption(BaseModel):
    """A pack quantity a family is sold in.

    Attributes:
        qty: Pieces per pack; drives shipping classification
        multiplier: Explicit price multiplier; derived from the config's
            pack exponent when omitted
    """

    qty: int
    multiplier: Decimal | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def expand_shorthand(cls, data: Any) -> Any:
        """Accept a bare int as shorthand for {"qty": n}."""
        if isinstance(data, int) and not isinstance(data, bool):
            return {"qty": data}
        return data


class ProductFamily(BaseModel):
    """A product family expanded into variants.

    Attributes:
        id: Slug prefix of every variant id in this family
        name: Human readable family name
        category: Fastener category
        base_price_usd_cents: Price of one pack of 10 with all multipliers at 1
        axes: Ordered axes; expansion order follows declaration order
        packs: Pack quantities, expanded innermost
        image_url: Optional real product image shared by the family
        alternate_family: Family whose same-combination variant is the
            alternate SKU of each variant in this family
    """

    id: str = Field(min_length=1)
    name: str = ""
    category: Category
    base_price_usd_cents: int
    axes: list[Axis] = Field(default_factory=list)
    packs: list[PackOption] = Field(default_factory=list)
    image_url: str | None = None
    alternate_family: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class CatalogConfig(BaseModel):
    """Root catalog authoring config. One config yields one generation."""

    standard: Literal["JIS"] = "JIS"
    target_count: int | None = Field(default=None, gt=0)
    price_rounding: Literal["cent", "dollar"] = "cent"
    pack_exponent: Decimal = Decimal("0.9")
    families: list[ProductFamily] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="forbid")


__all__ = [
    "Axis",
    "AxisValue",
    "CatalogConfig",
    "Category",
    "PackOption",
    "ProductFamily",
]
