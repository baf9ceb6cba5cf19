"""Genre tree and its flattened, cursor-addressable row list."""

from __future__ import annotations

from .flat_list import FlatRow, GameRow, GenreHeader, build_flat_list, header_index, row_genre
from .genre_tree import GenreTree, build_genre_tree

__all__ = [
    "GenreTree",
    "build_genre_tree",
    "FlatRow",
    "GenreHeader",
    "GameRow",
    "build_flat_list",
    "row_genre",
    "header_index",
]
