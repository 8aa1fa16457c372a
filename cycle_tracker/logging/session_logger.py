"""Session logger for step-by-step replay of a tracking session."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from cycle_tracker.config import SessionLogConfig
from cycle_tracker.models.card import Card
from cycle_tracker.models.cycle_state import CycleState

from .formatters import format_card, format_state


class SessionLogger:
    """Logger for session events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    The file is an audit trail only and is never read back.
    """

    def __init__(self, config: SessionLogConfig | None = None):
        """Initialize session logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or SessionLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "SessionLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, catalog_size: int) -> None:
        """Log session start.

        Args:
            catalog_size: Number of cards in the loaded catalog.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "catalog_size": catalog_size,
        })

    def log_play(self, card: Card, source: str, state: CycleState) -> None:
        """Log a played card.

        Args:
            card: Card that was played.
            source: "hand" or "draw_pile".
            state: State after the play.
        """
        self._write({
            "type": "play",
            "card": format_card(card),
            "source": source,
            "state": format_state(state),
        })

    def log_add(self, card: Card, state: CycleState) -> None:
        """Log a card added to the hand."""
        self._write({
            "type": "add",
            "card": format_card(card),
            "state": format_state(state),
        })

    def log_undo(self, state: CycleState) -> None:
        """Log an undo with the restored state."""
        self._write({
            "type": "undo",
            "state": format_state(state),
        })

    def log_reset(self) -> None:
        """Log a session reset."""
        self._write({"type": "reset"})

    def log_session_end(self, cards_played: int) -> None:
        """Log session end.

        Args:
            cards_played: Cards played when the session ended.
        """
        self._write({
            "type": "session_end",
            "timestamp": datetime.now().isoformat(),
            "cards_played": cards_played,
        })
