"""One-line search prompt shown above both panes."""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import fit_line, truncate_text

SEARCH_PLACEHOLDER = "  Press / to search"
SEARCH_PREFIX = "/ "
SEARCH_CARET = "|"


def result_count_label(count: int) -> str:
    return "1 result" if count == 1 else f"{count} results"


def render_search_bar(
    query: str | None,
    width: int,
    result_count: int = 0,
    theme: UITheme | None = None,
) -> str:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if query is None:
        return fit_line(truncate_text(f"{active_theme.search_placeholder}{SEARCH_PLACEHOLDER}{reset}", width), width)

    line = (
        f"{active_theme.search_label}{SEARCH_PREFIX}{reset}"
        f"{query}{active_theme.search_caret}{SEARCH_CARET}{reset}"
    )
    if query:
        line += f"  {active_theme.search_count}({result_count_label(result_count)}){reset}"
    return fit_line(truncate_text(line, width), width)
