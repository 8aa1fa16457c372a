"""Formatters for session log output."""

from typing import Any

from cycle_tracker.models.card import Card, CardSlots
from cycle_tracker.models.cycle_state import CycleState


def format_card(card: Card | None) -> str | None:
    """Format a single card to string.

    Args:
        card: Card to format, or None for an empty slot.

    Returns:
        Card name, with " current/max" appended for evolution cards
        (e.g., "Knight (Evolution) 1/2"). None for an empty slot.
    """
    if card is None:
        return None
    if card.is_evolution:
        return f"{card.name} {card.cycle_label()}"
    return card.name


def format_slots(slots: CardSlots) -> list[str | None]:
    """Format every slot of a container.

    Args:
        slots: Container to format.

    Returns:
        List of formatted cards, None for empty slots.
    """
    return [format_card(c) for c in slots]


def format_state(state: CycleState) -> dict[str, Any]:
    """Format the whole cycle state to a JSON-serializable dict."""
    return {
        "active_hand": format_slots(state.active_hand),
        "draw_pile": format_slots(state.draw_pile),
        "deck": format_slots(state.deck),
        "champion": format_card(state.champion_in_deck),
        "cards_played": state.cards_played,
    }
