"""Tracking session: user commands on top of the cycle state."""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from cycle_tracker.catalog import CardCatalog, CatalogEntry, search
from cycle_tracker.logging import SessionLogger
from cycle_tracker.models.card import Card, CardSlots
from cycle_tracker.models.cycle_state import CycleState
from cycle_tracker.models.history import History

logger = logging.getLogger(__name__)


class CycleSession:
    """One player's tracking session.

    Every command returns True when it changed the state. Successful
    mutations are recorded in the history (one entry each) and reported
    through the on_change callback; failed commands do neither.
    """

    def __init__(
        self,
        catalog: CardCatalog | None = None,
        session_logger: SessionLogger | None = None,
    ):
        """Initialize session.

        Args:
            catalog: Card catalog used for search and selection
                (empty if not provided)
            session_logger: SessionLogger instance for event logging
        """
        self.catalog = catalog if catalog is not None else CardCatalog()
        self.session_logger = session_logger

        self.state = CycleState()
        self.history = History()
        self.history.seed(self.state)

        self._on_change: Callable[[CycleState], None] | None = None

    @property
    def cards_played(self) -> int:
        """Get number of cards played so far."""
        return self.state.cards_played

    def set_callbacks(
        self,
        on_change: Callable[[CycleState], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_change: Called with the state after every successful command
        """
        self._on_change = on_change

    def play_from_hand(self, index: int) -> bool:
        """Play the card in active hand slot index (0-based)."""
        card = self._slot_card(self.state.active_hand, index)
        if not self.state.play_from_hand(card):
            logger.debug(f"Nothing to play in hand slot {index}")
            return False

        logger.info(f"Played {card} from hand")
        if self.session_logger:
            self.session_logger.log_play(card, "hand", self.state)
        self._commit()
        return True

    def play_from_draw_pile(self, index: int) -> bool:
        """Play the card in draw pile slot index (0-based)."""
        card = self._slot_card(self.state.draw_pile, index)
        if not self.state.play_from_draw_pile(card):
            logger.debug(f"Nothing to play in draw pile slot {index}")
            return False

        logger.info(f"Played {card} from draw pile")
        if self.session_logger:
            self.session_logger.log_play(card, "draw_pile", self.state)
        self._commit()
        return True

    def add_card(self, card: Card | None) -> bool:
        """Add a newly seen card to the active hand."""
        if not self.state.add_card(card):
            logger.debug(f"Could not add {card}")
            return False

        logger.info(f"Added {card}")
        if self.session_logger:
            self.session_logger.log_add(card, self.state)
        self._commit()
        return True

    def select_card(self, selected: CatalogEntry | str) -> bool:
        """Handle a card picked from the search results.

        The card is added to the hand and, if that succeeded, played
        straight away. Each step gets its own history entry.

        Args:
            selected: Catalog entry or exact card name.

        Returns:
            True if the card was added and played.
        """
        entry = self.catalog.get(selected) if isinstance(selected, str) else selected
        if entry is None:
            logger.debug(f"Unknown card: {selected}")
            return False

        card = entry.to_card()
        if not self.add_card(card):
            return False
        return self.play_from_hand(self.state.active_hand.cards().index(card))

    def search(self, query: str) -> Iterator[CatalogEntry]:
        """Search the catalog for cards matching query."""
        return search(self.catalog, query)

    def undo(self) -> bool:
        """Revert the most recent successful command."""
        snapshot = self.history.undo()
        if snapshot is None:
            logger.debug("Nothing to undo")
            return False

        self.state.restore(snapshot)
        logger.info("Undo")
        if self.session_logger:
            self.session_logger.log_undo(self.state)
        self._notify()
        return True

    def reset(self) -> None:
        """Start over with empty containers and a fresh history."""
        self.state.reset()
        self.history.seed(self.state)
        logger.info("Session reset")
        if self.session_logger:
            self.session_logger.log_reset()
        self._notify()

    def _slot_card(self, slots: CardSlots, index: int) -> Card | None:
        if not 0 <= index < len(slots):
            return None
        return slots[index]

    def _commit(self) -> None:
        self.history.record(self.state)
        self._notify()

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(self.state)
