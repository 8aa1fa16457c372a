"""Card catalog and search."""

from .loader import CardCatalog, CatalogEntry, CatalogError, load_catalog
from .search import SearchKind, SearchQuery, matches_search, normalize, parse_search, search

__all__ = [
    "CardCatalog",
    "CatalogEntry",
    "CatalogError",
    "load_catalog",
    "SearchKind",
    "SearchQuery",
    "matches_search",
    "normalize",
    "parse_search",
    "search",
]
