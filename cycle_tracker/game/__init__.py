"""Session logic."""

from .session import CycleSession

__all__ = [
    "CycleSession",
]
