"""Artwork-to-terminal renderers.

Two interchangeable implementations share one ``render(path, width, height)``
contract returning text lines or ``None`` when nothing usable came out:
``ChafaRenderer`` shells out to ``chafa``; ``PillowRenderer`` draws truecolor
half blocks. ``select_renderer`` probes once at startup.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

RENDERER_CHOICES = ("auto", "chafa", "pillow", "none")
CHAFA_TIMEOUT_SECONDS = 5.0
HALF_BLOCK = "▀"


class ArtworkRenderer(Protocol):
    name: str

    def render(self, path: Path, width: int, height: int) -> list[str] | None: ...


class ChafaRenderer:
    """Render via the ``chafa`` CLI in plain ANSI symbol mode."""

    name = "chafa"

    def __init__(self, executable: str = "chafa") -> None:
        self.executable = executable

    def render(self, path: Path, width: int, height: int) -> list[str] | None:
        if width <= 0 or height <= 0 or not Path(path).is_file():
            return None
        cmd = [
            self.executable,
            "--format",
            "symbols",
            "--animate",
            "off",
            "--size",
            f"{width}x{height}",
            str(path),
        ]
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                timeout=CHAFA_TIMEOUT_SECONDS,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("chafa failed for %s: %s", path, exc)
            return None
        lines = [line for line in proc.stdout.splitlines() if line.strip()]
        return lines or None


class PillowRenderer:
    """Render with Pillow: each cell shows two vertical pixels via ``▀``."""

    name = "pillow"

    def render(self, path: Path, width: int, height: int) -> list[str] | None:
        if width <= 0 or height <= 0:
            return None
        try:
            with Image.open(path) as source:
                image = source.convert("RGB")
        except (OSError, UnidentifiedImageError) as exc:
            logger.debug("Pillow could not open %s: %s", path, exc)
            return None

        image.thumbnail((width, height * 2), Image.Resampling.LANCZOS)
        cols, pixel_rows = image.size
        if cols == 0 or pixel_rows == 0:
            return None
        pixels = image.load()

        lines: list[str] = []
        for top in range(0, pixel_rows, 2):
            cells: list[str] = []
            for x in range(cols):
                fr, fg, fb = pixels[x, top]
                if top + 1 < pixel_rows:
                    br, bg, bb = pixels[x, top + 1]
                    cells.append(f"\033[38;2;{fr};{fg};{fb}m\033[48;2;{br};{bg};{bb}m{HALF_BLOCK}")
                else:
                    cells.append(f"\033[49m\033[38;2;{fr};{fg};{fb}m{HALF_BLOCK}")
            lines.append("".join(cells) + "\033[0m")
        return lines


def select_renderer(preference: str = "auto") -> ArtworkRenderer | None:
    """Pick the artwork renderer once; ``None`` disables artwork."""
    choice = preference if preference in RENDERER_CHOICES else "auto"
    if choice == "none":
        return None
    chafa = shutil.which("chafa")
    if choice == "chafa":
        if chafa is None:
            logger.warning("chafa requested but not found on PATH; falling back to Pillow")
            return PillowRenderer()
        return ChafaRenderer(chafa)
    if choice == "pillow":
        return PillowRenderer()
    if chafa is not None:
        return ChafaRenderer(chafa)
    return PillowRenderer()
