"""Full-frame composition: search bar, tree/detail panes, status line.

``render_frame`` is pure: it reads state and returns lines. ``write_frame``
does the single terminal write per frame.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from ..library import GenreTree, build_flat_list
from ..models import FamilyMember
from ..navigation import NavigationState
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import fit_line, truncate_text
from .detail_pane import ArtworkView, render_detail_pane
from .search_bar import render_search_bar
from .tree_pane import render_search_results, render_tree_rows

PANE_SEPARATOR = "│"
DEFAULT_LEFT_PANE_PERCENT = 35.0
BROWSE_STATUS = "[jk] move  [l] open  [h] close  [/] search  [q] quit"
SEARCH_STATUS = "[↑↓] move  [enter] select  [esc] cancel"


def compute_left_width(total_width: int, percent: float = DEFAULT_LEFT_PANE_PERCENT) -> int:
    """Left pane columns; the separator always keeps one column."""
    if total_width <= 1:
        return 0
    return max(0, min(total_width - 1, int(total_width * percent / 100.0)))


def pane_height_for_terminal(rows: int) -> int:
    """Pane rows left after the search bar and status line."""
    return max(1, rows - 2)


@dataclass(frozen=True)
class FrameGeometry:
    width: int
    height: int
    left_width: int
    right_width: int

    @classmethod
    def for_size(cls, width: int, height: int, left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT) -> FrameGeometry:
        left_width = compute_left_width(width, left_pane_percent)
        right_width = max(0, width - left_width - len(PANE_SEPARATOR))
        return cls(width=width, height=max(0, height), left_width=left_width, right_width=right_width)


def render_status_line(search_mode: bool, width: int, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    legend = SEARCH_STATUS if search_mode else BROWSE_STATUS
    return fit_line(truncate_text(f"{active_theme.status}{legend}{active_theme.reset}", width), width)


def render_frame(
    width: int,
    height: int,
    state: NavigationState,
    tree: GenreTree,
    family_members: Sequence[FamilyMember],
    *,
    artwork: ArtworkView | None = None,
    left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT,
    theme: UITheme | None = None,
) -> list[str]:
    """Compose one frame of ``height + 2`` lines, each ``width`` columns wide.

    ``height`` is the pane height; the search bar and status line are added
    above and below it.
    """
    active_theme = theme or DEFAULT_THEME
    geometry = FrameGeometry.for_size(width, height, left_pane_percent)

    if state.search_mode:
        left_lines = render_search_results(
            state.filtered_games,
            state.search_query or "",
            state.cursor,
            geometry.left_width,
            geometry.height,
            list_start=state.list_start,
            theme=active_theme,
        )
    else:
        left_lines = render_tree_rows(
            build_flat_list(tree, state.expanded_genres),
            state.cursor,
            geometry.left_width,
            geometry.height,
            list_start=state.list_start,
            theme=active_theme,
        )
    right_lines = render_detail_pane(
        state.selected_game,
        family_members,
        geometry.right_width,
        geometry.height,
        artwork=artwork,
        theme=active_theme,
    )

    separator = f"{active_theme.divider}{PANE_SEPARATOR}{active_theme.reset}"
    lines = [render_search_bar(state.search_query, width, len(state.filtered_games), active_theme)]
    lines.extend(
        fit_line(f"{left}{separator}{right}", width)
        for left, right in zip(left_lines, right_lines)
    )
    lines.append(render_status_line(state.search_mode, width, active_theme))
    return lines


def write_frame(lines: Sequence[str], fd: int | None = None) -> None:
    """Write a composed frame from the top-left corner in one ``os.write``."""
    out = "\033[H\033[J" + "\r\n".join(lines)
    os.write(sys.stdout.fileno() if fd is None else fd, out.encode("utf-8", errors="replace"))
