"""Right pane: selected game details and family ownership."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..models import FamilyMember, Game
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import display_width, fit_line, fit_lines, truncate_text

OWNED_MARK = "✓"
NOT_OWNED_MARK = "✗"
MEMBER_NAME_COLUMNS = 20
OWNERSHIP_FIXED_COLUMNS = len("    ✓   — not owned")
ARTWORK_INDENT = "  "
EMPTY_DETAIL = "  Select a game to see details."
ARTWORK_LOADING = "  Loading artwork…"
ARTWORK_UNAVAILABLE = "  No artwork available"

ARTWORK_LOADING_STATUS = "loading"
ARTWORK_READY_STATUS = "ready"
ARTWORK_UNAVAILABLE_STATUS = "unavailable"


@dataclass(frozen=True)
class ArtworkView:
    """Artwork slot above the details; ``lines`` only set when ready."""

    status: str
    lines: tuple[str, ...] = ()


def artwork_rows_budget(height: int) -> int:
    return max(0, min(12, height // 2))


def artwork_columns_budget(width: int) -> int:
    return max(1, width - 2 * len(ARTWORK_INDENT))


def _artwork_lines(view: ArtworkView, height: int, theme: UITheme) -> list[str]:
    reset = theme.reset
    if view.status == ARTWORK_READY_STATUS and view.lines:
        return [f"{ARTWORK_INDENT}{line}{reset}" for line in view.lines[: artwork_rows_budget(height)]]
    if view.status == ARTWORK_LOADING_STATUS:
        return [f"{theme.placeholder}{ARTWORK_LOADING}{reset}"]
    return [f"{theme.placeholder}{ARTWORK_UNAVAILABLE}{reset}"]


def ownership_line(member: FamilyMember, appid: int, theme: UITheme, width: int = 0) -> str:
    """Mark, name and label for one member; the name column shrinks so the label fits ``width``."""
    reset = theme.reset
    name_columns = MEMBER_NAME_COLUMNS
    if width > 0:
        name_columns = max(1, min(MEMBER_NAME_COLUMNS, width - OWNERSHIP_FIXED_COLUMNS))
    name = truncate_text(member.persona_name, name_columns)
    name += " " * (name_columns - display_width(name))
    if member.owns(appid):
        return f"    {theme.owned}{OWNED_MARK}{reset} {name}  — {theme.owned}owned{reset}"
    return f"    {theme.not_owned}{NOT_OWNED_MARK}{reset} {name}  — {theme.placeholder}not owned{reset}"


def game_detail_lines(
    game: Game,
    family_members: Sequence[FamilyMember],
    width: int,
    theme: UITheme,
) -> list[str]:
    reset = theme.reset
    owners = sum(1 for member in family_members if member.owns(game.appid))
    lines = [
        f"{theme.detail_title}{truncate_text(f'  {game.name}', width)}{reset}",
        "",
        f"  {theme.detail_label}AppID:{reset}    {game.appid}",
        f"  {theme.detail_label}Playtime:{reset} {game.playtime_display}",
        "",
        f"{theme.detail_label}  Family ownership:{reset}",
    ]
    lines.extend(ownership_line(member, game.appid, theme, width) for member in family_members)
    lines.append("")
    lines.append(f"{theme.detail_label}  {owners} / {len(family_members)} members own this{reset}")
    return lines


def render_detail_pane(
    game: Game | None,
    family_members: Sequence[FamilyMember],
    width: int,
    height: int,
    artwork: ArtworkView | None = None,
    theme: UITheme | None = None,
) -> list[str]:
    """Return exactly ``height`` lines, each ``width`` columns wide.

    ``artwork`` is ``None`` when no renderer is usable; the pane then shows
    text details only.
    """
    active_theme = theme or DEFAULT_THEME
    if game is None:
        lines = ["", f"{active_theme.placeholder}{EMPTY_DETAIL}{active_theme.reset}", ""]
    else:
        lines = []
        if artwork is not None:
            lines.extend(_artwork_lines(artwork, height, active_theme))
            lines.append("")
        lines.extend(game_detail_lines(game, family_members, width, active_theme))
    return [fit_line(truncate_text(line, width), width) for line in fit_lines(lines, height)]
