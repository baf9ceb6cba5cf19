"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the search bar, tree pane, detail pane, and
status line. Artwork colors come from the image itself and are not themed.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    genre_marker: str
    genre_name: str
    game_name: str
    cursor_marker: str
    search_label: str
    search_caret: str
    search_placeholder: str
    search_count: str
    detail_title: str
    detail_label: str
    owned: str
    not_owned: str
    placeholder: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    genre_marker="\033[38;5;44m",
    genre_name="\033[1;34m",
    game_name="\033[38;5;252m",
    cursor_marker="\033[36m",
    search_label="\033[1;36m",
    search_caret="\033[1m",
    search_placeholder="\033[2m",
    search_count="\033[2;38;5;250m",
    detail_title="\033[1m",
    detail_label="\033[2m",
    owned="\033[32m",
    not_owned="\033[31m",
    placeholder="\033[2m",
    status="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    genre_marker="\033[38;5;39m",
    genre_name="\033[1;38;5;45m",
    game_name="\033[38;5;153m",
    cursor_marker="\033[38;5;45m",
    search_label="\033[1;38;5;45m",
    search_caret="\033[1;38;5;153m",
    search_placeholder="\033[2;38;5;110m",
    search_count="\033[2;38;5;110m",
    detail_title="\033[1;38;5;45m",
    detail_label="\033[2;38;5;110m",
    owned="\033[38;5;84m",
    not_owned="\033[38;5;209m",
    placeholder="\033[2;38;5;110m",
    status="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    genre_marker="",
    genre_name="",
    game_name="",
    cursor_marker="",
    search_label="",
    search_caret="",
    search_placeholder="",
    search_count="",
    detail_title="",
    detail_label="",
    owned="",
    not_owned="",
    placeholder="",
    status="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
