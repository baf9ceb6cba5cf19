"""Steam Web API access and the startup library load."""

from __future__ import annotations

from .client import SteamApiError, SteamClient, parse_id_list
from .library import LibraryData, load_library

__all__ = [
    "SteamApiError",
    "SteamClient",
    "parse_id_list",
    "LibraryData",
    "load_library",
]
