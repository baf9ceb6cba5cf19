"""Tests for browser composition."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from steamshelf.config import Settings
from steamshelf.models import Game
from steamshelf.runtime import app
from steamshelf.steam import LibraryData
from steamshelf.ui_theme import PLAIN_THEME


class BuildArtworkSlotTests(unittest.TestCase):
    def test_disabled_artwork_has_no_scheduler(self) -> None:
        with mock.patch.object(app, "select_renderer") as select:
            slot = app.build_artwork_slot(Settings(), enabled=False)
        self.assertIsNone(slot.scheduler)
        select.assert_not_called()

    def test_renderer_none_disables_artwork(self) -> None:
        slot = app.build_artwork_slot(Settings(artwork_renderer="none"))
        self.assertIsNone(slot.scheduler)

    def test_renderer_wires_scheduler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = Settings(artwork_renderer="pillow", artwork_dir=Path(tmp))
            slot = app.build_artwork_slot(settings)
        self.assertIsNotNone(slot.scheduler)


class RunBrowserTests(unittest.TestCase):
    def test_builds_context_and_runs_loop(self) -> None:
        library = LibraryData(games=[Game(1, "Portal", ["Puzzle"])], family_members=[])
        with mock.patch.object(app, "TerminalController") as terminal_cls, mock.patch.object(
            app, "run_main_loop"
        ) as run_loop:
            app.run_browser(library, Settings(), PLAIN_THEME, artwork_enabled=False, stdin_fd=5, stdout_fd=6)

        terminal_cls.assert_called_once_with(stdin_fd=5, stdout_fd=6)
        context = run_loop.call_args.args[0]
        self.assertEqual(context.tree.genre_names(), ["Puzzle"])
        self.assertIs(context.theme, PLAIN_THEME)
        self.assertIsNone(context.artwork.scheduler)


if __name__ == "__main__":
    unittest.main()
