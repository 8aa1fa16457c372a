"""Card and CardSlots models."""

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, PrivateAttr

# Conventional slot counts
HAND_SIZE = 4
DRAW_PILE_SIZE = 4
DECK_SIZE = 8

# Returned by cycle accessors of non-evolution cards and by failed lookups
NOT_APPLICABLE = -1


class Rarity(str, Enum):
    """Card rarity as listed in the catalog."""

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    CHAMPION = "champion"


class Card(BaseModel, frozen=True):
    """Single playable card.

    Identity fields are frozen. Evolution cards additionally carry a cycle
    counter which is advanced in place every time the card is played.
    Two cards are equal when their names match, regardless of cycle state.
    """

    name: str
    icon: str = ""
    rarity: Rarity | str = Rarity.COMMON
    is_champion: bool = False
    is_evolution: bool = False

    _current_cycle: int = PrivateAttr(default=0)
    _max_cycle: int = PrivateAttr(default=0)

    def set_evolution_details(self, current_cycle: int, max_cycle: int) -> None:
        """Set the evolution counters. Ignored for non-evolution cards.

        Args:
            current_cycle: Cycles completed towards the evolution.
            max_cycle: Cycles needed before the evolved version is played.
        """
        if not self.is_evolution:
            return
        self._current_cycle = current_cycle
        self._max_cycle = max_cycle

    def increase_cycle(self) -> None:
        """Advance the evolution counter, wrapping to 0 after max_cycle."""
        if not self.is_evolution:
            return
        self._current_cycle = (self._current_cycle + 1) % (self._max_cycle + 1)

    @property
    def current_cycle(self) -> int:
        """Current evolution cycle, or -1 for non-evolution cards."""
        if self.is_evolution:
            return self._current_cycle
        return NOT_APPLICABLE

    @property
    def max_cycle(self) -> int:
        """Maximum evolution cycle, or -1 for non-evolution cards."""
        if self.is_evolution:
            return self._max_cycle
        return NOT_APPLICABLE

    def cycle_label(self) -> str:
        """Get the "current/max" label shown under evolution cards."""
        if not self.is_evolution:
            return ""
        return f"{self.current_cycle}/{self.max_cycle}"

    def equals(self, other: "Card | None") -> bool:
        """Check whether other is the same card (by name only)."""
        if other is None:
            return False
        return self.name == other.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        if self.is_evolution:
            return f"Card({self.name!r}, cycle={self.cycle_label()})"
        return f"Card({self.name!r})"


class CardSlots:
    """Ordered sequence of card slots.

    Used for the draw pile (4 slots), the active hand (4 slots) and the
    deck (8 slots). A slot holds either a Card or None (empty slot).

    The slot count is only a convention: remove_by_identity shrinks the
    sequence and insert_at/push_back grow it, so callers pair every
    removal with exactly one insertion.
    """

    def __init__(self, size: int = 0, slots: list[Card | None] | None = None):
        """Initialize slots.

        Args:
            size: Number of empty slots to create.
            slots: Initial slot contents (copied). Overrides size.
        """
        if slots is not None:
            self._slots: list[Card | None] = list(slots)
        else:
            self._slots = [None] * size

    def push_back(self, card: Card | None) -> None:
        """Append a slot at the end."""
        self._slots.append(card)

    def pop_front(self) -> Card | None:
        """Remove and return the first slot (None if empty or no slots)."""
        if not self._slots:
            return None
        return self._slots.pop(0)

    def insert_at(self, index: int, card: Card | None) -> None:
        """Insert a new slot at index, shifting later slots right."""
        self._slots.insert(index, card)

    def contains(self, card: Card | None) -> bool:
        """Check for a card, or for an empty slot when card is None."""
        if card is None:
            return any(slot is None for slot in self._slots)
        return any(slot is not None and slot.equals(card) for slot in self._slots)

    def remove_by_identity(self, card: Card) -> int:
        """Remove the first slot holding card, closing the gap.

        Returns:
            Index of the removed slot, or -1 if not found.
        """
        for i, slot in enumerate(self._slots):
            if slot is not None and slot.equals(card):
                del self._slots[i]
                return i
        return NOT_APPLICABLE

    def replace_at(self, index: int, card: Card | None) -> None:
        """Overwrite the slot at index."""
        self._slots[index] = card

    def first_empty(self) -> int:
        """Get index of the first empty slot, or -1 if all are filled."""
        for i, slot in enumerate(self._slots):
            if slot is None:
                return i
        return NOT_APPLICABLE

    def count(self) -> int:
        """Get number of filled slots."""
        return sum(1 for slot in self._slots if slot is not None)

    def cards(self) -> list[Card | None]:
        """Get slot contents as a list."""
        return list(self._slots)

    def snapshot(self) -> "CardSlots":
        """Copy the slot structure. Cards are shared, not cloned."""
        return CardSlots(slots=self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Card | None]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> Card | None:
        return self._slots[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardSlots):
            return NotImplemented
        if len(self._slots) != len(other._slots):
            return False
        return all(
            (a is None and b is None) or (a is not None and a.equals(b))
            for a, b in zip(self._slots, other._slots)
        )

    def __str__(self) -> str:
        return "[" + ", ".join(str(s) if s is not None else "_" for s in self._slots) + "]"

    def __repr__(self) -> str:
        return f"CardSlots({self._slots!r})"
