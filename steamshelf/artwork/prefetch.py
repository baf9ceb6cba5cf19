"""Background artwork fetch + render worker.

Latest request wins: while the worker is busy, newer requests replace the
pending one. The main loop drains results and keeps only the one matching the
current selection.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from ..models import Game

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArtworkRequest:
    """One artwork job for a game at a given cell geometry."""

    request_id: int
    game: Game
    width: int
    height: int

    @property
    def key(self) -> tuple[int, int, int]:
        return (self.game.appid, self.width, self.height)


@dataclass(frozen=True)
class ArtworkResult:
    """Completed job; ``lines`` is ``None`` when no artwork could be shown."""

    request: ArtworkRequest
    lines: tuple[str, ...] | None


class ArtworkPrefetchScheduler:
    """Single-threaded latest-request-wins artwork scheduler."""

    def __init__(
        self,
        fetch: Callable[[Game], Path | None],
        render: Callable[[Path, int, int], list[str] | None],
    ) -> None:
        self._fetch = fetch
        self._render = render
        self._lock = threading.Lock()
        self._pending: ArtworkRequest | None = None
        self._running = False
        self._next_request_id = 1
        self._results: Queue[ArtworkResult] = Queue()

    def _load(self, request: ArtworkRequest) -> tuple[str, ...] | None:
        path = self._fetch(request.game)
        if path is None:
            return None
        lines = self._render(path, request.width, request.height)
        return tuple(lines) if lines else None

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return

            try:
                lines = self._load(request)
            except Exception:
                logger.exception("Artwork job failed for appid %s", request.game.appid)
                lines = None
            self._results.put(ArtworkResult(request=request, lines=lines))

    def schedule(self, game: Game, width: int, height: int) -> ArtworkRequest:
        """Queue or replace pending work and return the request."""
        with self._lock:
            request = ArtworkRequest(
                request_id=self._next_request_id,
                game=game,
                width=width,
                height=height,
            )
            self._next_request_id += 1
            self._pending = request
            if self._running:
                return request
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="steamshelf-artwork-prefetch",
            daemon=True,
        )
        worker.start()
        return request

    def drain_results(self) -> list[ArtworkResult]:
        """Drain all completed results."""
        out: list[ArtworkResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


__all__ = [
    "ArtworkRequest",
    "ArtworkResult",
    "ArtworkPrefetchScheduler",
]
