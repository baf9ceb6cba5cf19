"""Navigation state and the browse/search controller."""

from __future__ import annotations

from .controller import NavigationController, clamp_cursor, follow_cursor, move_cursor
from .state import NavigationState

__all__ = [
    "NavigationController",
    "NavigationState",
    "clamp_cursor",
    "follow_cursor",
    "move_cursor",
]
