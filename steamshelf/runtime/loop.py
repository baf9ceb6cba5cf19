"""Main interactive event loop for the terminal UI.

Each iteration: fold in finished artwork jobs, render when something changed,
then read one key and hand it to the navigation controller.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ..input import read_key
from ..library import GenreTree
from ..models import FamilyMember
from ..navigation import NavigationController, follow_cursor
from ..render import (
    FrameGeometry,
    artwork_columns_budget,
    artwork_rows_budget,
    pane_height_for_terminal,
    render_frame,
)
from ..render.frame import DEFAULT_LEFT_PANE_PERCENT
from ..ui_theme import DEFAULT_THEME, UITheme
from .artwork_slot import ArtworkSlot
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Key-read timeouts; artwork polling is faster than resize polling."""

    artwork_poll_ms: int = 50
    resize_poll_ms: int = 250


@dataclass
class RuntimeLoopContext:
    """Everything ``run_main_loop`` reads, with injectable terminal I/O."""

    controller: NavigationController
    tree: GenreTree
    family_members: Sequence[FamilyMember]
    artwork: ArtworkSlot
    theme: UITheme = DEFAULT_THEME
    left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT
    read_key: Callable[..., str] = read_key
    terminal_size: Callable[[], os.terminal_size] = field(
        default=lambda: shutil.get_terminal_size((80, 24))
    )


def build_frame(context: RuntimeLoopContext, columns: int, rows: int) -> list[str]:
    """Sync scroll offset and artwork slot for the size, then render a frame."""
    state = context.controller.state
    pane_height = pane_height_for_terminal(rows)
    geometry = FrameGeometry.for_size(columns, pane_height, context.left_pane_percent)
    state.list_start = follow_cursor(
        state.list_start,
        state.cursor,
        pane_height,
        context.controller.active_length(),
    )
    context.artwork.sync(
        state.selected_game,
        artwork_columns_budget(geometry.right_width),
        artwork_rows_budget(pane_height),
    )
    return render_frame(
        columns,
        pane_height,
        state,
        context.tree,
        context.family_members,
        artwork=context.artwork.view,
        left_pane_percent=context.left_pane_percent,
        theme=context.theme,
    )


def run_main_loop(
    context: RuntimeLoopContext,
    terminal: TerminalController,
    write_frame: Callable[[list[str], int], None],
    timing: RuntimeLoopTiming | None = None,
) -> None:
    """Run until the controller records a quit request."""
    active_timing = timing or RuntimeLoopTiming()
    state = context.controller.state
    last_size: tuple[int, int] | None = None
    dirty = True

    with terminal.raw_mode():
        while not state.quit_requested:
            term = context.terminal_size()
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                dirty = True
            if context.artwork.apply_results():
                dirty = True

            if dirty:
                write_frame(build_frame(context, term.columns, term.lines), terminal.stdout_fd)
                dirty = False

            timeout_ms = active_timing.artwork_poll_ms if context.artwork.pending else active_timing.resize_poll_ms
            key = context.read_key(terminal.stdin_fd, timeout_ms=timeout_ms)
            if not key:
                continue
            context.controller.handle_key(key)
            dirty = True
