"""Left pane: genre tree in browse mode, filtered games in search mode."""

from __future__ import annotations

from collections.abc import Sequence

from ..library import FlatRow, GameRow, GenreHeader
from ..models import Game
from ..navigation.controller import follow_cursor
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import fit_line, fit_lines, truncate_text

INDENT = "  "
EXPANDED_MARKER = "▼"
COLLAPSED_MARKER = "▶"
GAME_BRANCH = "├ "
CURSOR_MARKER = " ◀"
NO_RESULTS = "  No results"


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace(theme.reset, theme.reset + theme.reverse) + theme.reset


def format_row(label: str, selected: bool, width: int, theme: UITheme) -> str:
    """Shape one list row; the cursor row gets reverse video and a trailing marker."""
    text = truncate_text(label, width - len(CURSOR_MARKER) - 1)
    if not selected:
        return fit_line(text, width)
    body = selected_with_ansi(fit_line(text, width - len(CURSOR_MARKER)), theme)
    return fit_line(f"{body}{theme.cursor_marker}{CURSOR_MARKER}{theme.reset}", width)


def genre_header_label(row: GenreHeader, theme: UITheme) -> str:
    marker = EXPANDED_MARKER if row.expanded else COLLAPSED_MARKER
    reset = theme.reset
    return f"{theme.genre_marker}{marker}{reset} {theme.genre_name}{row.genre}{reset} ({row.game_count})"


def game_row_label(row: GameRow, theme: UITheme) -> str:
    return f"{INDENT}{GAME_BRANCH}{theme.game_name}{row.game.name}{theme.reset}"


def row_label(row: FlatRow, theme: UITheme) -> str:
    if isinstance(row, GenreHeader):
        return genre_header_label(row, theme)
    return game_row_label(row, theme)


def _window(cursor: int, list_start: int, height: int, length: int) -> range:
    start = follow_cursor(list_start, cursor, height, length)
    return range(start, min(length, start + max(0, height)))


def render_tree_rows(
    rows: Sequence[FlatRow],
    cursor: int,
    width: int,
    height: int,
    list_start: int = 0,
    theme: UITheme | None = None,
) -> list[str]:
    active_theme = theme or DEFAULT_THEME
    lines = [
        format_row(row_label(rows[idx], active_theme), idx == cursor, width, active_theme)
        for idx in _window(cursor, list_start, height, len(rows))
    ]
    return [fit_line(line, width) for line in fit_lines(lines, height)]


def render_search_results(
    games: Sequence[Game],
    query: str,
    cursor: int,
    width: int,
    height: int,
    list_start: int = 0,
    theme: UITheme | None = None,
) -> list[str]:
    active_theme = theme or DEFAULT_THEME
    if not games:
        lines = [f"{active_theme.placeholder}{NO_RESULTS}{active_theme.reset}"] if query else []
    else:
        lines = [
            format_row(f"{INDENT}{games[idx].name}", idx == cursor, width, active_theme)
            for idx in _window(cursor, list_start, height, len(games))
        ]
    return [fit_line(line, width) for line in fit_lines(lines, height)]
