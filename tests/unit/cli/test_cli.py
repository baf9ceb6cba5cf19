"""Tests for CLI argument handling and startup failures."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from steamshelf import cli, config
from steamshelf.steam import LibraryData, SteamApiError
from steamshelf.ui_theme import OCEAN_THEME, PLAIN_THEME

CREDENTIALS = config.Credentials(api_key="key", steam_id="100")


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.log_file = Path(self.tmp.name) / "logs" / "steamshelf.log"
        mock.patch.object(cli.config, "load_settings", return_value=config.Settings()).start()
        mock.patch.object(cli, "print_loading").start()
        self.addCleanup(mock.patch.stopall)
        root = logging.getLogger()
        self.addCleanup(self._restore_logging, list(root.handlers), root.level)

    @staticmethod
    def _restore_logging(handlers: list[logging.Handler], level: int) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)

    def _main(self, *args: str) -> None:
        cli.main(["--log-file", str(self.log_file), *args])

    def test_parser_flags(self) -> None:
        args = cli.build_parser().parse_args(["--theme", "ocean", "--no-artwork", "--genres", "-v"])
        self.assertEqual(args.theme, "ocean")
        self.assertTrue(args.no_artwork)
        self.assertTrue(args.genres)
        self.assertTrue(args.verbose)
        self.assertEqual(args.log_file, config.DEFAULT_LOG_PATH)

    def test_missing_credentials_exit(self) -> None:
        error = config.ConfigError("Missing STEAM_API_KEY in environment")
        with mock.patch.object(cli.config, "load_credentials", side_effect=error):
            with self.assertRaises(SystemExit) as ctx:
                self._main()
        self.assertIn("STEAM_API_KEY", str(ctx.exception.code))

    def test_library_failure_exits_before_browser(self) -> None:
        with mock.patch.object(cli.config, "load_credentials", return_value=CREDENTIALS), mock.patch.object(
            cli, "load_library", side_effect=SteamApiError("down")
        ), mock.patch.object(cli, "run_browser") as run_browser:
            with self.assertRaises(SystemExit) as ctx:
                self._main()

        self.assertIn("Could not load Steam library", str(ctx.exception.code))
        run_browser.assert_not_called()

    def test_successful_load_runs_browser_with_options(self) -> None:
        library = LibraryData(games=[], family_members=[])
        with mock.patch.object(cli.config, "load_credentials", return_value=CREDENTIALS), mock.patch.object(
            cli, "load_library", return_value=library
        ) as load_library, mock.patch.object(cli, "run_browser") as run_browser:
            self._main("--theme", "ocean", "--no-artwork", "--genres", "--cache-dir", self.tmp.name)

        self.assertTrue(load_library.call_args.kwargs["with_genres"])
        passed_library, settings, theme = run_browser.call_args.args
        self.assertIs(passed_library, library)
        self.assertEqual(settings.artwork_dir, Path(self.tmp.name))
        self.assertIs(theme, OCEAN_THEME)
        self.assertFalse(run_browser.call_args.kwargs["artwork_enabled"])

    def test_no_color_selects_plain_theme(self) -> None:
        library = LibraryData(games=[], family_members=[])
        with mock.patch.object(cli.config, "load_credentials", return_value=CREDENTIALS), mock.patch.object(
            cli, "load_library", return_value=library
        ), mock.patch.object(cli, "run_browser") as run_browser:
            self._main("--no-color")

        self.assertIs(run_browser.call_args.args[2], PLAIN_THEME)

    def test_keyboard_interrupt_exits_quietly(self) -> None:
        library = LibraryData(games=[], family_members=[])
        with mock.patch.object(cli.config, "load_credentials", return_value=CREDENTIALS), mock.patch.object(
            cli, "load_library", return_value=library
        ), mock.patch.object(cli, "run_browser", side_effect=KeyboardInterrupt):
            self._main()

    def test_logging_goes_to_file(self) -> None:
        cli.configure_logging(self.log_file, verbose=True)
        logging.getLogger("steamshelf.test").debug("hello log")
        for handler in logging.getLogger().handlers:
            handler.flush()

        self.assertIn("hello log", self.log_file.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
