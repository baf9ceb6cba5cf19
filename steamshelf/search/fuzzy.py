from __future__ import annotations

from collections.abc import Sequence

from ..models import Game


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def subsequence_positions(query: str, candidate: str) -> list[int] | None:
    """Greedy leftmost scan placing each query char after the previous one.

    Returns the matched indices in ``candidate``, or ``None`` as soon as one
    query character has no occurrence past the scan cursor.
    """
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    positions: list[int] = []
    prev_idx = -1
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        positions.append(idx)
        prev_idx = idx
    return positions


def is_subsequence(query: str, candidate: str) -> bool:
    return subsequence_positions(query, candidate) is not None


def substring_matches(games: Sequence[Game], query: str) -> list[Game]:
    if not query:
        return []
    return [game for game in games if substring_index(query, game.name) is not None]


def subsequence_matches(games: Sequence[Game], query: str) -> list[Game]:
    """Games whose names hold ``query`` only as an ordered subsequence."""
    if not query:
        return []
    return [
        game
        for game in games
        if substring_index(query, game.name) is None and is_subsequence(query, game.name)
    ]


def search_games(games: Sequence[Game], query: str) -> list[Game]:
    """Filter ``games`` by ``query``: substring hits first, then subsequence hits.

    Both passes keep library order and never share a game. An empty query
    matches nothing.
    """
    return substring_matches(games, query) + subsequence_matches(games, query)
