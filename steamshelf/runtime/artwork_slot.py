"""Tracks which artwork the detail pane should show for the selection.

Requests go to the background scheduler; completed results are accepted only
when they match the currently selected game and pane geometry.
"""

from __future__ import annotations

from ..artwork import ArtworkPrefetchScheduler
from ..models import Game
from ..render import (
    ARTWORK_LOADING_STATUS,
    ARTWORK_READY_STATUS,
    ARTWORK_UNAVAILABLE_STATUS,
    ArtworkView,
)


class ArtworkSlot:
    def __init__(self, scheduler: ArtworkPrefetchScheduler | None) -> None:
        self.scheduler = scheduler
        self.key: tuple[int, int, int] | None = None
        self.view: ArtworkView | None = None

    @property
    def pending(self) -> bool:
        return self.view is not None and self.view.status == ARTWORK_LOADING_STATUS

    def sync(self, game: Game | None, width: int, height: int) -> bool:
        """Point the slot at ``game``; return whether the view changed."""
        if self.scheduler is None or game is None or width <= 0 or height <= 0:
            changed = self.view is not None
            self.key = None
            self.view = None
            return changed
        key = (game.appid, width, height)
        if key == self.key:
            return False
        self.key = key
        self.view = ArtworkView(status=ARTWORK_LOADING_STATUS)
        self.scheduler.schedule(game, width, height)
        return True

    def apply_results(self) -> bool:
        """Drain finished jobs; stale ones are dropped. Return whether the view changed."""
        if self.scheduler is None:
            return False
        changed = False
        for result in self.scheduler.drain_results():
            if result.request.key != self.key:
                continue
            if result.lines:
                self.view = ArtworkView(status=ARTWORK_READY_STATUS, lines=result.lines)
            else:
                self.view = ArtworkView(status=ARTWORK_UNAVAILABLE_STATUS)
            changed = True
        return changed
