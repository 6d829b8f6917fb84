"""Catalog data source: HTTP loading plus name display helpers."""

from .loader import DEFAULT_DATA_URL, load_catalog
from .types import Catalog, EntryCatalog, RawRecord, format_category, sprite_url

__all__ = [
    "Catalog",
    "DEFAULT_DATA_URL",
    "EntryCatalog",
    "RawRecord",
    "format_category",
    "load_catalog",
    "sprite_url",
]
