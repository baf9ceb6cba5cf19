"""Cursor-addressable projection of the genre tree.

``build_flat_list`` is the only place that decides which row sits at a given
cursor index. Callers rebuild it after every change to the expanded set.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Union

from ..models import Game
from .genre_tree import GenreTree


@dataclass(frozen=True)
class GenreHeader:
    """Collapsible genre row."""

    genre: str
    game_count: int
    expanded: bool


@dataclass(frozen=True)
class GameRow:
    """Game row shown beneath an expanded genre."""

    game: Game
    parent_genre: str


FlatRow = Union[GenreHeader, GameRow]


def build_flat_list(tree: GenreTree, expanded_genres: Collection[str]) -> list[FlatRow]:
    rows: list[FlatRow] = []
    for genre, games in tree:
        expanded = genre in expanded_genres
        rows.append(GenreHeader(genre=genre, game_count=len(games), expanded=expanded))
        if expanded:
            rows.extend(GameRow(game=game, parent_genre=genre) for game in games)
    return rows


def row_genre(row: FlatRow) -> str:
    """Return the genre a row belongs to (its own for headers)."""
    if isinstance(row, GenreHeader):
        return row.genre
    return row.parent_genre


def header_index(rows: list[FlatRow], genre: str) -> int | None:
    for idx, row in enumerate(rows):
        if isinstance(row, GenreHeader) and row.genre == genre:
            return idx
    return None
