"""Compose the browser from a loaded library and run it."""

from __future__ import annotations

import logging
import sys

from ..artwork import ArtworkCache, ArtworkPrefetchScheduler, select_renderer
from ..config import Settings
from ..library import build_genre_tree
from ..navigation import NavigationController
from ..render import write_frame
from ..steam import LibraryData
from ..ui_theme import UITheme
from .artwork_slot import ArtworkSlot
from .loop import RuntimeLoopContext, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_artwork_slot(settings: Settings, enabled: bool = True) -> ArtworkSlot:
    """Probe the renderer once and wire it to a cache-backed scheduler."""
    renderer = select_renderer(settings.artwork_renderer) if enabled else None
    if renderer is None:
        logger.info("Artwork disabled")
        return ArtworkSlot(None)
    logger.info("Artwork renderer: %s", renderer.name)
    cache = ArtworkCache(settings.artwork_dir, max_entries=settings.artwork_cache_max_entries)
    return ArtworkSlot(ArtworkPrefetchScheduler(fetch=cache.fetch, render=renderer.render))


def run_browser(
    library: LibraryData,
    settings: Settings,
    theme: UITheme,
    *,
    artwork_enabled: bool = True,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    tree = build_genre_tree(library.games)
    controller = NavigationController(tree, library.games)
    context = RuntimeLoopContext(
        controller=controller,
        tree=tree,
        family_members=library.family_members,
        artwork=build_artwork_slot(settings, enabled=artwork_enabled),
        theme=theme,
        left_pane_percent=settings.left_pane_percent,
    )
    terminal = TerminalController(
        stdin_fd=sys.stdin.fileno() if stdin_fd is None else stdin_fd,
        stdout_fd=sys.stdout.fileno() if stdout_fd is None else stdout_fd,
    )
    run_main_loop(context, terminal, write_frame=write_frame, timing=RuntimeLoopTiming())
