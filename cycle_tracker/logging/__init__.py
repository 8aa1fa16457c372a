"""Session logging module."""

from .formatters import format_card, format_slots, format_state
from .session_logger import SessionLogger

__all__ = [
    "SessionLogger",
    "format_card",
    "format_slots",
    "format_state",
]
