"""Thin Steam Web API client.

Every call degrades to an empty/fallback value on failure, except
``fetch_owned_games`` for the primary user, whose failure the caller treats
as an unrecoverable initial load.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any

import requests

from ..models import FamilyMember, Game

logger = logging.getLogger(__name__)

STEAM_API_BASE = "https://api.steampowered.com"
STORE_API_BASE = "https://store.steampowered.com/api"
FAMILY_IDS_ENV = "FAMILY_STEAM_IDS"
PLAYER_SUMMARY_BATCH_SIZE = 100
DEFAULT_TIMEOUT_SECONDS = 15.0


class SteamApiError(RuntimeError):
    """Raised when a required Steam API response cannot be obtained."""


def parse_id_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _batched(items: Sequence[str], size: int) -> list[list[str]]:
    return [list(items[idx : idx + size]) for idx in range(0, len(items), size)]


class SteamClient:
    def __init__(
        self,
        api_key: str,
        steam_id: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.api_key = api_key
        self.steam_id = str(steam_id)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self._environ = os.environ if environ is None else environ

    def _get_json(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"unexpected payload from {url}")
        return data

    def fetch_owned_games(self, steam_id: str | None = None) -> list[Game]:
        """Return owned games for ``steam_id`` (default: the primary user).

        Raises ``SteamApiError`` when the request or payload fails.
        """
        try:
            data = self._get_json(
                f"{STEAM_API_BASE}/IPlayerService/GetOwnedGames/v1/",
                {
                    "key": self.api_key,
                    "steamid": steam_id or self.steam_id,
                    "include_appinfo": 1,
                    "include_played_free_games": 1,
                    "format": "json",
                },
            )
        except (requests.RequestException, ValueError) as exc:
            raise SteamApiError(f"owned games lookup failed: {exc}") from exc

        games_json = (data.get("response") or {}).get("games") or []
        return [
            Game(
                appid=int(entry["appid"]),
                name=entry.get("name") or "Unknown",
                genres=(),
                playtime_minutes=int(entry.get("playtime_forever") or 0),
            )
            for entry in games_json
            if isinstance(entry, dict) and "appid" in entry
        ]

    def fallback_family_ids(self) -> list[str]:
        return parse_id_list(self._environ.get(FAMILY_IDS_ENV, ""))

    def fetch_family_member_ids(self) -> list[str]:
        """Family-group member ids, excluding the primary user.

        Authorization failures, errors, and empty groups fall back to the
        ``FAMILY_STEAM_IDS`` environment list.
        """
        try:
            response = self.session.get(
                f"{STEAM_API_BASE}/IFamilyGroupsService/GetFamilyGroupForUser/v1/",
                params={"key": self.api_key, "steamid": self.steam_id, "format": "json"},
                timeout=self.timeout,
            )
            if response.status_code in (401, 403):
                logger.info("Family group lookup not authorized (%s); using fallback ids", response.status_code)
                return self.fallback_family_ids()
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Family group lookup failed: %s", exc)
            return self.fallback_family_ids()

        group = ((data or {}).get("response") or {}).get("family_group") or {}
        members = group.get("members") or []
        ids = [
            str(member.get("steamid"))
            for member in members
            if isinstance(member, dict) and member.get("steamid") is not None
        ]
        ids = [member_id for member_id in ids if member_id != self.steam_id]
        return ids or self.fallback_family_ids()

    def fetch_player_summaries(self, steam_ids: Sequence[str]) -> dict[str, str]:
        """Map steam id to persona name, batching at most 100 ids per call."""
        names: dict[str, str] = {}
        for batch in _batched([str(steam_id) for steam_id in steam_ids], PLAYER_SUMMARY_BATCH_SIZE):
            try:
                data = self._get_json(
                    f"{STEAM_API_BASE}/ISteamUser/GetPlayerSummaries/v2/",
                    {"key": self.api_key, "steamids": ",".join(batch), "format": "json"},
                )
            except (requests.RequestException, ValueError) as exc:
                logger.warning("Player summary lookup failed for %d ids: %s", len(batch), exc)
                continue
            for player in (data.get("response") or {}).get("players") or []:
                if isinstance(player, dict) and player.get("steamid") and player.get("personaname"):
                    names[str(player["steamid"])] = str(player["personaname"])
        return names

    def build_family_member(self, steam_id: str, persona_name: str) -> FamilyMember:
        """Build a member from their library; private libraries yield no games."""
        try:
            games = self.fetch_owned_games(steam_id)
        except SteamApiError as exc:
            logger.info("Library for %s unavailable: %s", steam_id, exc)
            games = []
        return FamilyMember(
            steam_id=str(steam_id),
            persona_name=persona_name,
            owned_app_ids=frozenset(game.appid for game in games),
        )

    def fetch_app_genres(self, appid: int) -> tuple[str, ...]:
        """Store-page genres for ``appid``; empty when unknown or on failure."""
        try:
            data = self._get_json(f"{STORE_API_BASE}/appdetails", {"appids": appid, "filters": "genres"})
        except (requests.RequestException, ValueError) as exc:
            logger.debug("Genre lookup failed for %s: %s", appid, exc)
            return ()
        entry = data.get(str(appid))
        if not isinstance(entry, dict) or not entry.get("success"):
            return ()
        details = entry.get("data")
        if not isinstance(details, dict):
            return ()
        genres = details.get("genres") or []
        return tuple(
            str(genre["description"])
            for genre in genres
            if isinstance(genre, dict) and genre.get("description")
        )
