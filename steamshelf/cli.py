"""Command-line front door for steamshelf.

Parses CLI options, configures logging, loads credentials and the library,
then dispatches into the interactive browser.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from . import config
from .runtime import run_browser
from .steam import SteamApiError, SteamClient, load_library
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path, verbose: bool) -> None:
    """Send log records to ``log_file``; the terminal belongs to the UI."""
    handlers: list[logging.Handler] = []
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError:
        handlers.append(logging.NullHandler())
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def print_loading(message: str) -> None:
    sys.stderr.write(f"\r\033[K{message}")
    sys.stderr.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steamshelf",
        description="Browse your Steam library by genre with family-sharing ownership.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("--no-artwork", action="store_true", help="Do not fetch or render cover art.")
    parser.add_argument("--genres", action="store_true", help="Look up store genres for every game (slow).")
    parser.add_argument("--cache-dir", type=Path, default=None, help="Artwork cache directory.")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=config.DEFAULT_LOG_PATH,
        help=f"Log file (default: {config.DEFAULT_LOG_PATH}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and launch the browser.

    Missing credentials and a failed initial library fetch abort with
    ``SystemExit`` before the interactive loop starts.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    settings = config.load_settings()
    if args.cache_dir is not None:
        settings = dataclasses.replace(settings, artwork_dir=args.cache_dir)
    if args.genres:
        settings = dataclasses.replace(settings, enrich_genres=True)
    theme = resolve_theme(args.theme or settings.theme, no_color=args.no_color)

    try:
        credentials = config.load_credentials()
    except config.ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    print_loading("Connecting to Steam API…")
    client = SteamClient(api_key=credentials.api_key, steam_id=credentials.steam_id)
    try:
        library = load_library(client, progress=print_loading, with_genres=settings.enrich_genres)
    except SteamApiError as exc:
        logging.getLogger(__name__).error("Initial library load failed: %s", exc)
        sys.stderr.write("\n")
        raise SystemExit(f"Could not load Steam library: {exc}") from exc
    print_loading("")

    try:
        run_browser(library, settings, theme, artwork_enabled=not args.no_artwork)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
