"""Bounded on-disk cover-art cache.

One ``<appid>.jpg`` per game, no manifest: file existence is the hit test and
mtime is the recency signal for eviction. Every failure degrades to "no
artwork"; nothing here raises into the UI.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

import requests

from ..models import Game

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 200
DEFAULT_TIMEOUT_SECONDS = 10.0
ARTWORK_SUFFIX = ".jpg"


class ArtworkCache:
    """Download-through cache with oldest-mtime-first eviction."""

    def __init__(
        self,
        cache_dir: Path,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.cache_dir = Path(cache_dir)
        self.max_entries = max(1, int(max_entries))
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def path_for(self, appid: int) -> Path:
        return self.cache_dir / f"{appid}{ARTWORK_SUFFIX}"

    def entries(self) -> list[Path]:
        """Cached artwork files, oldest modification time first."""
        stamped: list[tuple[int, str, Path]] = []
        try:
            candidates = list(self.cache_dir.glob(f"*{ARTWORK_SUFFIX}"))
        except OSError:
            return []
        for path in candidates:
            try:
                stamped.append((path.stat().st_mtime_ns, path.name, path))
            except OSError:
                # Removed by another process between glob and stat.
                continue
        stamped.sort(key=lambda item: (item[0], item[1]))
        return [path for _, _, path in stamped]

    def fetch(self, game: Game) -> Path | None:
        """Return a local artwork path for ``game``, downloading on a miss."""
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Artwork cache dir unavailable %s: %s", self.cache_dir, exc)
            return None

        path = self.path_for(game.appid)
        if path.exists():
            return path

        for url in (game.artwork_url, game.header_url):
            payload = self._download(url)
            if payload is None:
                continue
            if self._store(path, payload):
                return path
            return None
        logger.debug("No artwork for appid %s", game.appid)
        return None

    def _download(self, url: str) -> bytes | None:
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            logger.debug("Artwork request failed %s: %s", url, exc)
            return None
        if not response.ok or not response.content:
            logger.debug("Artwork unavailable %s (status %s)", url, response.status_code)
            return None
        return response.content

    def _store(self, path: Path, payload: bytes) -> bool:
        self.evict_if_full()
        tmp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
        try:
            tmp_path.write_bytes(payload)
            # Last write wins when processes race on the same appid.
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.warning("Could not write artwork %s: %s", path, exc)
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            return False
        return True

    def evict_if_full(self) -> list[Path]:
        """Delete the oldest entries until one slot below ``max_entries`` is free."""
        entries = self.entries()
        overflow = len(entries) - self.max_entries + 1
        if overflow <= 0:
            return []
        evicted: list[Path] = []
        for path in entries[:overflow]:
            try:
                path.unlink()
            except FileNotFoundError:
                pass
            except OSError as exc:
                logger.warning("Could not evict artwork %s: %s", path, exc)
                continue
            evicted.append(path)
        return evicted
