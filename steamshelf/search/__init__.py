"""Game-name search: literal substring pass followed by a subsequence pass."""

from __future__ import annotations

from .fuzzy import (
    is_subsequence,
    search_games,
    subsequence_matches,
    subsequence_positions,
    substring_index,
    substring_matches,
)

__all__ = [
    "search_games",
    "substring_index",
    "substring_matches",
    "subsequence_matches",
    "subsequence_positions",
    "is_subsequence",
]
