"""Cycle models."""

from .card import DECK_SIZE, DRAW_PILE_SIZE, HAND_SIZE, Card, CardSlots, Rarity
from .cycle_state import CycleState
from .history import History, Snapshot

__all__ = [
    "Card",
    "CardSlots",
    "Rarity",
    "CycleState",
    "History",
    "Snapshot",
    "HAND_SIZE",
    "DRAW_PILE_SIZE",
    "DECK_SIZE",
]
