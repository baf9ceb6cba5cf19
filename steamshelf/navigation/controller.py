"""Browse/search state machine driven by decoded key tokens.

Every cursor-relative action rebuilds the flat list first, so the cursor is
always read against the list that is active at that moment.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..library import FlatRow, GameRow, GenreHeader, GenreTree, build_flat_list, header_index, row_genre
from ..models import Game
from ..search import search_games
from .state import NavigationState

QUIT_KEYS = frozenset({"CTRL_C", "EOF"})
BROWSE_UP_KEYS = frozenset({"UP", "k"})
BROWSE_DOWN_KEYS = frozenset({"DOWN", "j"})
BROWSE_OPEN_KEYS = frozenset({"RIGHT", "ENTER", "l"})
BROWSE_CLOSE_KEYS = frozenset({"LEFT", "h"})
SEARCH_ERASE_KEYS = frozenset({"BACKSPACE", "DELETE"})


def clamp_cursor(cursor: int, length: int) -> int:
    """Clamp into ``[0, max(0, length - 1)]``; an empty list pins the cursor at 0."""
    return max(0, min(cursor, max(0, length - 1)))


def move_cursor(state: NavigationState, delta: int, length: int) -> bool:
    previous = state.cursor
    state.cursor = clamp_cursor(state.cursor + delta, length)
    return state.cursor != previous


def follow_cursor(list_start: int, cursor: int, visible_rows: int, length: int) -> int:
    """Return a scroll offset that keeps ``cursor`` inside the visible window."""
    rows = max(1, visible_rows)
    if cursor < list_start:
        list_start = cursor
    elif cursor >= list_start + rows:
        list_start = cursor - rows + 1
    return max(0, min(list_start, max(0, length - rows)))


def expand_or_select(state: NavigationState, rows: Sequence[FlatRow]) -> bool:
    if not 0 <= state.cursor < len(rows):
        return False
    row = rows[state.cursor]
    if isinstance(row, GenreHeader):
        if row.genre in state.expanded_genres:
            return False
        state.expanded_genres.add(row.genre)
        return True
    if isinstance(row, GameRow):
        state.selected_game = row.game
        return True
    return False


def collapse(state: NavigationState, rows: Sequence[FlatRow], tree: GenreTree) -> bool:
    if not 0 <= state.cursor < len(rows):
        return False
    row = rows[state.cursor]
    genre = row_genre(row)
    if genre not in state.expanded_genres:
        return False
    state.expanded_genres.discard(genre)
    if isinstance(row, GameRow):
        collapsed = build_flat_list(tree, state.expanded_genres)
        target = header_index(collapsed, genre)
        state.cursor = clamp_cursor(target if target is not None else state.cursor, len(collapsed))
    return True


def enter_search(state: NavigationState) -> None:
    state.search_query = ""
    state.filtered_games = []
    state.cursor = 0
    state.list_start = 0


def exit_search(state: NavigationState) -> None:
    state.search_query = None
    state.filtered_games = []
    state.cursor = 0
    state.list_start = 0


def apply_query(
    state: NavigationState,
    games: Sequence[Game],
    query: str,
    search: Callable[[Sequence[Game], str], list[Game]] = search_games,
) -> None:
    state.search_query = query
    state.filtered_games = search(games, query)
    state.cursor = 0
    state.list_start = 0


def confirm_search(state: NavigationState) -> bool:
    if not state.filtered_games:
        return False
    state.selected_game = state.filtered_games[clamp_cursor(state.cursor, len(state.filtered_games))]
    exit_search(state)
    return True


class NavigationController:
    """Owns ``NavigationState`` and applies one key token per call."""

    def __init__(
        self,
        tree: GenreTree,
        games: Sequence[Game],
        state: NavigationState | None = None,
        search: Callable[[Sequence[Game], str], list[Game]] = search_games,
    ) -> None:
        self.tree = tree
        self.games = list(games)
        self.state = state if state is not None else NavigationState()
        self._search = search

    def flat_list(self) -> list[FlatRow]:
        return build_flat_list(self.tree, self.state.expanded_genres)

    def active_length(self) -> int:
        if self.state.search_mode:
            return len(self.state.filtered_games)
        return len(self.flat_list())

    def handle_key(self, key: str) -> bool:
        """Apply ``key`` to the state; return whether it was consumed."""
        if self.state.quit_requested:
            return False
        if key in QUIT_KEYS:
            self.state.quit_requested = True
            return True
        if self.state.search_mode:
            return self._handle_search_key(key)
        return self._handle_browse_key(key)

    def _handle_browse_key(self, key: str) -> bool:
        state = self.state
        rows = self.flat_list()
        if key in BROWSE_UP_KEYS:
            move_cursor(state, -1, len(rows))
            return True
        if key in BROWSE_DOWN_KEYS:
            move_cursor(state, 1, len(rows))
            return True
        if key in BROWSE_OPEN_KEYS:
            expand_or_select(state, rows)
            return True
        if key in BROWSE_CLOSE_KEYS:
            collapse(state, rows, self.tree)
            return True
        if key == "/":
            enter_search(state)
            return True
        if key == "q":
            state.quit_requested = True
            return True
        return False

    def _handle_search_key(self, key: str) -> bool:
        state = self.state
        query = state.search_query or ""
        if key == "ESC":
            exit_search(state)
            return True
        if key in SEARCH_ERASE_KEYS:
            apply_query(state, self.games, query[:-1], self._search)
            return True
        if key == "ENTER":
            confirm_search(state)
            return True
        if key == "UP":
            move_cursor(state, -1, len(state.filtered_games))
            return True
        if key == "DOWN":
            move_cursor(state, 1, len(state.filtered_games))
            return True
        if len(key) == 1 and key.isprintable():
            apply_query(state, self.games, query + key, self._search)
            return True
        return False
