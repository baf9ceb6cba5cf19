from __future__ import annotations

from dataclasses import dataclass, field

from ..models import Game


@dataclass
class NavigationState:
    """Mutable UI state owned by ``NavigationController``.

    ``search_query`` is ``None`` in browse mode; any string (including ``""``)
    means search mode. ``filtered_games`` is only meaningful in search mode.
    """

    cursor: int = 0
    expanded_genres: set[str] = field(default_factory=set)
    search_query: str | None = None
    filtered_games: list[Game] = field(default_factory=list)
    selected_game: Game | None = None
    list_start: int = 0
    quit_requested: bool = False

    @property
    def search_mode(self) -> bool:
        return self.search_query is not None
