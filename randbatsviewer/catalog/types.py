"""Catalog shapes and display helpers for category and entry names."""

from __future__ import annotations

from collections.abc import Mapping

RawRecord = Mapping[str, object]
EntryCatalog = Mapping[str, RawRecord]
Catalog = Mapping[str, EntryCatalog]

CATEGORY_SUFFIX = ".json"
SPRITE_URL_TEMPLATE = "https://play.pokemonshowdown.com/sprites/ani/{name}.gif"


def format_category(category: str) -> str:
    """Return category display name without the upstream ``.json`` suffix."""
    return category.replace(CATEGORY_SUFFIX, "")


def sprite_url(entry_name: str) -> str:
    """Return the animated sprite URL for an entry name."""
    return SPRITE_URL_TEMPLATE.format(name=entry_name.lower())
