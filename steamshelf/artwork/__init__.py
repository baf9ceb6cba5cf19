"""Cover-art cache, terminal renderers, and the background fetch worker."""

from __future__ import annotations

from .cache import DEFAULT_MAX_ENTRIES, ArtworkCache
from .prefetch import ArtworkPrefetchScheduler, ArtworkRequest, ArtworkResult
from .renderer import RENDERER_CHOICES, ArtworkRenderer, ChafaRenderer, PillowRenderer, select_renderer

__all__ = [
    "ArtworkCache",
    "DEFAULT_MAX_ENTRIES",
    "ArtworkPrefetchScheduler",
    "ArtworkRequest",
    "ArtworkResult",
    "ArtworkRenderer",
    "ChafaRenderer",
    "PillowRenderer",
    "RENDERER_CHOICES",
    "select_renderer",
]
