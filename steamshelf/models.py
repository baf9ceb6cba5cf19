"""Library value types: games and family members.

Both are immutable after construction. ``Game`` carries the derived display
fields used by the tree and detail panes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

UNCATEGORIZED = "Uncategorized"
STEAM_CDN_APPS_URL = "https://cdn.cloudflare.steamstatic.com/steam/apps"


def format_playtime(minutes: int) -> str:
    """Format total playtime minutes for the detail pane."""
    minutes = max(0, int(minutes))
    if minutes == 0:
        return "Never played"
    hours, rest = divmod(minutes, 60)
    if hours == 0:
        return f"{rest}m"
    if rest == 0:
        return f"{hours}h"
    return f"{hours}h {rest}m"


@dataclass(frozen=True)
class Game:
    """One owned game from the primary user's library."""

    appid: int
    name: str
    genres: tuple[str, ...] = ()
    playtime_minutes: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "genres", tuple(self.genres))
        object.__setattr__(self, "playtime_minutes", max(0, int(self.playtime_minutes)))

    @property
    def primary_genre(self) -> str:
        return self.genres[0] if self.genres else UNCATEGORIZED

    @property
    def playtime_display(self) -> str:
        return format_playtime(self.playtime_minutes)

    @property
    def artwork_url(self) -> str:
        """Portrait library capsule, the preferred artwork source."""
        return f"{STEAM_CDN_APPS_URL}/{self.appid}/library_600x900.jpg"

    @property
    def header_url(self) -> str:
        """Landscape store header, used when the capsule is missing."""
        return f"{STEAM_CDN_APPS_URL}/{self.appid}/header.jpg"

    def with_genres(self, genres: Iterable[str]) -> Game:
        return Game(self.appid, self.name, tuple(genres), self.playtime_minutes)


@dataclass(frozen=True)
class FamilyMember:
    """One family-group member, including the primary user."""

    steam_id: str
    persona_name: str
    owned_app_ids: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "owned_app_ids", frozenset(self.owned_app_ids))

    def owns(self, appid: int) -> bool:
        return appid in self.owned_app_ids
