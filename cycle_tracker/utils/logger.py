"""Logging utilities and cycle state display."""

import logging
import sys
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from cycle_tracker.catalog import CatalogEntry
    from cycle_tracker.models.card import Card, CardSlots
    from cycle_tracker.models.cycle_state import CycleState

EMPTY_SLOT = "?"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class CycleDisplay:
    """Display cycle state to stdout."""

    def __init__(self, show_cycles: bool = True):
        """Initialize display.

        Args:
            show_cycles: Whether to show evolution cycle labels
        """
        self.show_cycles = show_cycles

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def format_slot(self, card: "Card | None") -> str:
        """Format one slot as it appears on screen."""
        if card is None:
            return EMPTY_SLOT
        if self.show_cycles and card.is_evolution:
            return f"{card.name} ({card.cycle_label()})"
        return card.name

    def format_row(self, label: str, slots: "CardSlots") -> str:
        """Format a container as a numbered row."""
        cells = [f"{i}:{self.format_slot(c)}" for i, c in enumerate(slots, 1)]
        return f"{label:<10}" + " | ".join(cells)

    def print_state(self, state: "CycleState") -> None:
        """Print hand, draw pile and cards played."""
        print(self.format_row("Hand", state.active_hand))
        print(self.format_row("Next", state.draw_pile))
        print(f"Cards played: {state.cards_played}")
        if not state.has_room():
            print("(all slots known)")

    def print_results(self, entries: Iterable["CatalogEntry"]) -> None:
        """Print search results."""
        found = False
        for entry in entries:
            found = True
            print(f"  {entry.name}")
        if not found:
            print("  No matching cards")

    def print_help(self) -> None:
        """Print command summary."""
        print("Commands:")
        print("  h N          play card N (1-4) from hand")
        print("  d N          play card N (1-4) from draw pile")
        print("  add QUERY    add the first card matching QUERY and play it")
        print("  search QUERY list matching cards (prefix evo / hero to narrow)")
        print("  undo, z      undo last action")
        print("  reset        start over")
        print("  show         show current cycle")
        print("  quit         exit")
