"""Genre index over the game library.

The tree is two levels deep: genre name to its games. Each game appears
exactly once, under its primary genre.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..models import Game


def _genre_sort_key(genre: str) -> tuple[str, str]:
    return (genre.casefold(), genre)


def _game_sort_key(game: Game) -> tuple[str, str, int]:
    return (game.name.casefold(), game.name, game.appid)


@dataclass(frozen=True)
class GenreTree:
    """Ordered ``(genre, games)`` pairs, both levels sorted case-insensitively."""

    sections: tuple[tuple[str, tuple[Game, ...]], ...] = ()

    def __iter__(self) -> Iterator[tuple[str, tuple[Game, ...]]]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def genre_names(self) -> list[str]:
        return [genre for genre, _ in self.sections]

    def games_in(self, genre: str) -> tuple[Game, ...]:
        for name, games in self.sections:
            if name == genre:
                return games
        return ()

    def game_count(self) -> int:
        return sum(len(games) for _, games in self.sections)


def build_genre_tree(games: Iterable[Game]) -> GenreTree:
    """Group games by primary genre and sort genres and games by name."""
    grouped: dict[str, list[Game]] = {}
    for game in games:
        grouped.setdefault(game.primary_genre, []).append(game)

    sections = tuple(
        (genre, tuple(sorted(grouped[genre], key=_game_sort_key)))
        for genre in sorted(grouped, key=_genre_sort_key)
    )
    return GenreTree(sections=sections)
