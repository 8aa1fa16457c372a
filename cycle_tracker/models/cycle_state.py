"""Cycle state models."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from .card import DECK_SIZE, DRAW_PILE_SIZE, HAND_SIZE, Card, CardSlots
from .history import Snapshot

logger = logging.getLogger(__name__)


class CycleState(BaseModel):
    """Draw pile, active hand and deck of one player.

    Every operation returns False and leaves the state untouched when its
    preconditions are not met. A card (by name) is never in more than one
    container.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    draw_pile: CardSlots = Field(default_factory=lambda: CardSlots(DRAW_PILE_SIZE))
    active_hand: CardSlots = Field(default_factory=lambda: CardSlots(HAND_SIZE))
    deck: CardSlots = Field(default_factory=lambda: CardSlots(DECK_SIZE))
    champion_in_deck: Card | None = None
    cards_played: int = 0

    def play_from_hand(self, card: Card | None) -> bool:
        """Play a card from the active hand.

        The card leaves its hand slot, the front of the draw pile takes
        that slot and the card goes to the back of the draw pile.

        Args:
            card: Card to play.

        Returns:
            True if the card was played.
        """
        if card is None or not self.active_hand.contains(card):
            return False

        if card.is_evolution:
            card.increase_cycle()

        index = self.active_hand.remove_by_identity(card)
        next_card = self.draw_pile.pop_front()
        self.active_hand.insert_at(index, next_card)
        self.draw_pile.push_back(card)

        self.cards_played += 1
        logger.debug(f"Played {card} from hand slot {index}, drew {next_card}")
        return True

    def play_from_draw_pile(self, card: Card | None) -> bool:
        """Play a card straight from the draw pile.

        The card moves to the back of the draw pile; the active hand and
        deck are not touched.

        Args:
            card: Card to play.

        Returns:
            True if the card was played.
        """
        if card is None or not self.draw_pile.contains(card):
            return False

        if card.is_evolution:
            card.increase_cycle()

        index = self.draw_pile.remove_by_identity(card)
        self.draw_pile.push_back(card)

        self.cards_played += 1
        logger.debug(f"Played {card} from draw pile slot {index}")
        return True

    def add_card(self, card: Card | None) -> bool:
        """Put a newly seen card into the first empty hand slot.

        Args:
            card: Card to add.

        Returns:
            True if the card was added. False if there is no room, the
            card is already tracked, or the hand itself is full.
        """
        if card is None:
            return False

        if not self.has_room():
            return False

        if self.contains(card):
            return False

        index = self.active_hand.first_empty()
        if index < 0:
            return False

        self.active_hand.replace_at(index, card)
        logger.debug(f"Added {card} to hand slot {index}")
        return True

    def has_room(self) -> bool:
        """Check for an empty slot in the active hand or draw pile."""
        return self.draw_pile.contains(None) or self.active_hand.contains(None)

    def contains(self, card: Card) -> bool:
        """Check whether card is in the draw pile, active hand or deck."""
        return (
            self.active_hand.contains(card)
            or self.draw_pile.contains(card)
            or self.deck.contains(card)
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Apply a snapshot, copying its containers."""
        self.draw_pile = snapshot.draw_pile.snapshot()
        self.active_hand = snapshot.active_hand.snapshot()
        self.deck = snapshot.deck.snapshot()
        self.champion_in_deck = snapshot.champion_in_deck
        self.cards_played = snapshot.cards_played

    def reset(self) -> None:
        """Empty every container and zero the counters."""
        self.draw_pile = CardSlots(DRAW_PILE_SIZE)
        self.active_hand = CardSlots(HAND_SIZE)
        self.deck = CardSlots(DECK_SIZE)
        self.champion_in_deck = None
        self.cards_played = 0

    def __str__(self) -> str:
        return (
            f"Hand: {self.active_hand} Draw pile: {self.draw_pile} "
            f"Played: {self.cards_played}"
        )
