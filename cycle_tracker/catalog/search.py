"""Lenient card search over the catalog.

Queries are matched against card names after stripping everything but
letters and digits, so "mini pekka", "Mini P.E.K.K.A" and "minipekka"
all find the same card. Two prefixes narrow the search:

- "evo": only evolution cards (name contains "(evolution)")
- "hero": only hero cards (name contains "hero")
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .loader import CardCatalog, CatalogEntry

EVOLUTION_PREFIX = "evo"
HERO_PREFIX = "hero"
EVOLUTION_MARKER = "(evolution)"
HERO_MARKER = "hero"

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class SearchKind(str, Enum):
    """Kind of search selected by the query prefix."""

    NORMAL = "normal"
    EVOLUTION = "evolution"
    HERO = "hero"


@dataclass(frozen=True)
class SearchQuery:
    """Parsed search query."""

    kind: SearchKind
    rest: str  # Normalized text after the prefix


def normalize(text: str) -> str:
    """Lowercase and strip all non-alphanumeric characters."""
    return _NON_ALNUM.sub("", text.lower())


def parse_search(raw: str) -> SearchQuery:
    """Split a raw query into its kind and normalized remainder."""
    q = raw.lower().strip()

    if q.startswith(EVOLUTION_PREFIX):
        return SearchQuery(SearchKind.EVOLUTION, normalize(q[len(EVOLUTION_PREFIX):]))

    if q.startswith(HERO_PREFIX):
        return SearchQuery(SearchKind.HERO, normalize(q[len(HERO_PREFIX):]))

    return SearchQuery(SearchKind.NORMAL, normalize(q))


def matches_search(entry: CatalogEntry, raw: str) -> bool:
    """Check whether a catalog entry matches a raw query."""
    query = parse_search(raw)
    name = entry.name.lower()
    norm_name = normalize(name)

    if query.kind == SearchKind.EVOLUTION:
        if EVOLUTION_MARKER not in name:
            return False
        return query.rest == "" or query.rest in norm_name

    if query.kind == SearchKind.HERO:
        if HERO_MARKER not in name:
            return False
        return query.rest == "" or query.rest in norm_name

    return query.rest in norm_name


def search(catalog: CardCatalog, raw: str) -> Iterator[CatalogEntry]:
    """Yield matching catalog entries in catalog order.

    Nothing is yielded for a query without letters or digits.
    """
    if not normalize(raw):
        return
    for entry in catalog:
        if matches_search(entry, raw):
            yield entry
