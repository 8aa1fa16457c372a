"""Card catalog loading."""

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from cycle_tracker.models.card import Card, Rarity

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "cards.json"


class CatalogError(ValueError):
    """Catalog file could not be parsed."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class CatalogEntry(BaseModel):
    """One catalog record, as stored in cards.json."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    icon: str = ""
    rarity: Rarity | str = Rarity.COMMON
    is_champion: bool = Field(default=False, alias="isChampion")
    is_evolution: bool = Field(default=False, alias="isEvolution")
    current_cycle: int = Field(default=0, alias="currentcycle")
    max_cycle: int = Field(default=0, alias="maxcycle")

    @field_validator("rarity", mode="before")
    @classmethod
    def _fold_rarity(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        value = value.strip().lower()
        try:
            return Rarity(value)
        except ValueError:
            # Tiers added to the game later are kept as plain strings
            return value

    @model_validator(mode="after")
    def _check_cycles(self) -> "CatalogEntry":
        if not self.is_evolution:
            return self
        if self.max_cycle < 0:
            raise ValueError(f"maxcycle must be >= 0, got {self.max_cycle}")
        if not 0 <= self.current_cycle <= self.max_cycle:
            raise ValueError(
                f"currentcycle must be between 0 and {self.max_cycle}, got {self.current_cycle}"
            )
        return self

    def to_card(self) -> Card:
        """Create a fresh Card for this entry."""
        card = Card(
            name=self.name,
            icon=self.icon,
            rarity=self.rarity,
            is_champion=self.is_champion,
            is_evolution=self.is_evolution,
        )
        if card.is_evolution:
            card.set_evolution_details(self.current_cycle, self.max_cycle)
        return card


class CardCatalog:
    """Read-only mapping of card name to catalog entry."""

    def __init__(self, entries: list[CatalogEntry] | None = None):
        """Initialize catalog.

        Args:
            entries: Catalog entries. Later entries replace earlier ones
                with the same name.
        """
        self._entries: dict[str, CatalogEntry] = {}
        for entry in entries or []:
            self._entries[entry.name] = entry

    def get(self, name: str) -> CatalogEntry | None:
        """Get an entry by exact name."""
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CardCatalog({len(self._entries)} cards)"


def parse_catalog(data: Any) -> CardCatalog:
    """Build a catalog from decoded JSON.

    Accepts either an object keyed by card name or a list of records.

    Raises:
        ValidationError: If a record does not match the schema.
        TypeError: If data is neither an object nor a list.
    """
    if isinstance(data, dict):
        records = list(data.values())
    elif isinstance(data, list):
        records = data
    else:
        raise TypeError(f"Expected object or list, got {type(data).__name__}")
    return CardCatalog([CatalogEntry.model_validate(r) for r in records])


def load_catalog(path: Path | str | None = None) -> CardCatalog:
    """Load the card catalog from a JSON file.

    Args:
        path: Path to catalog file. If None, uses the bundled catalog.

    Returns:
        CardCatalog. Empty if the file does not exist.

    Raises:
        CatalogError: If the file is not valid JSON or a record is malformed.
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    if not catalog_path.exists():
        logger.warning(f"Catalog not found: {catalog_path}")
        return CardCatalog()

    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = json.load(f)
        catalog = parse_catalog(data)
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        raise CatalogError(catalog_path, str(e)) from e

    logger.info(f"Loaded {len(catalog)} cards from {catalog_path}")
    return catalog
