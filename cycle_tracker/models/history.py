"""Undo history of cycle state snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .card import Card, CardSlots

if TYPE_CHECKING:
    from .cycle_state import CycleState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Copy of all cycle containers and counters at one point in time.

    Containers are copied slot-wise; the Cards they reference are shared
    with the live state.
    """

    draw_pile: CardSlots
    active_hand: CardSlots
    deck: CardSlots
    champion_in_deck: Card | None
    cards_played: int

    @classmethod
    def of(cls, state: CycleState) -> Snapshot:
        """Build a snapshot from the current state."""
        return cls(
            draw_pile=state.draw_pile.snapshot(),
            active_hand=state.active_hand.snapshot(),
            deck=state.deck.snapshot(),
            champion_in_deck=state.champion_in_deck,
            cards_played=state.cards_played,
        )


class History:
    """Linear undo log.

    Once seeded, the log always keeps its first entry: undo never removes
    the seed snapshot.
    """

    def __init__(self) -> None:
        self._entries: list[Snapshot] = []

    def seed(self, state: CycleState) -> None:
        """Clear the log and record state as the seed entry."""
        self._entries.clear()
        self.record(state)

    def record(self, state: CycleState) -> Snapshot:
        """Append a snapshot of state.

        Returns:
            The recorded snapshot.
        """
        snapshot = Snapshot.of(state)
        self._entries.append(snapshot)
        logger.debug(f"Recorded snapshot #{len(self._entries)}")
        return snapshot

    def undo(self) -> Snapshot | None:
        """Drop the most recent snapshot.

        Returns:
            The snapshot to restore, or None if only the seed entry
            (or nothing) is left.
        """
        if not self.can_undo:
            return None
        self._entries.pop()
        return self._entries[-1]

    @property
    def can_undo(self) -> bool:
        """Check whether an entry besides the seed exists."""
        return len(self._entries) > 1

    @property
    def latest(self) -> Snapshot | None:
        """Get the most recent snapshot."""
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)
