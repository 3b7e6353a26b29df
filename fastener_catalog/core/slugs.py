"""Slug helpers shared by variant id derivation and catalog validation."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_SLUG_SAFE = re.compile(r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?")


def slugify(value: str) -> str:
    """Lower-case and collapse runs of non-alphanumerics to '-'.

    >>> slugify(" Zinc Plated ")
    'zinc-plated'
    >>> slugify("10.9")
    '10-9'
    """
    return _NON_ALNUM.sub("-", value.strip().lower()).strip("-")


def is_slug_safe(value: str) -> bool:
    """True if value can be used verbatim as a variant id or URL segment."""
    return bool(_SLUG_SAFE.fullmatch(value))
