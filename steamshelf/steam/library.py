"""Initial data load: the user's games plus family ownership."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..models import FamilyMember, Game
from .client import SteamClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LibraryData:
    games: list[Game]
    family_members: list[FamilyMember]


def _unique(ids: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in ids:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


def enrich_genres(client: SteamClient, games: list[Game], progress: Callable[[str], None]) -> list[Game]:
    enriched: list[Game] = []
    total = len(games)
    for idx, game in enumerate(games, start=1):
        progress(f"Fetching genres… {idx}/{total}")
        genres = client.fetch_app_genres(game.appid)
        enriched.append(game.with_genres(genres) if genres else game)
    return enriched


def load_library(
    client: SteamClient,
    progress: Callable[[str], None] = lambda _message: None,
    with_genres: bool = False,
) -> LibraryData:
    """Fetch everything the browser needs before the interactive loop starts.

    ``SteamApiError`` from the primary user's owned-games lookup propagates;
    every other lookup degrades.
    """
    progress("Fetching your game library…")
    games = client.fetch_owned_games()
    if with_genres:
        games = enrich_genres(client, games, progress)

    progress("Fetching family group…")
    member_ids = client.fetch_family_member_ids()
    all_ids = _unique([client.steam_id, *member_ids])

    progress("Fetching player names…")
    names = client.fetch_player_summaries(all_ids)

    members: list[FamilyMember] = []
    for idx, steam_id in enumerate(all_ids, start=1):
        persona = names.get(steam_id) or f"Member {idx}"
        progress(f"Fetching library for {persona}…")
        members.append(client.build_family_member(steam_id, persona))

    logger.info("Loaded %d games and %d family members", len(games), len(members))
    return LibraryData(games=games, family_members=members)
