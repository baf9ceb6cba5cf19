"""Tests for the tree, search result, search bar and detail panes."""

from __future__ import annotations

import unittest

from steamshelf.library import build_flat_list, build_genre_tree
from steamshelf.models import FamilyMember, Game
from steamshelf.render.ansi import ANSI_ESCAPE_RE, display_width
from steamshelf.render.detail_pane import (
    ARTWORK_LOADING_STATUS,
    ARTWORK_READY_STATUS,
    ARTWORK_UNAVAILABLE_STATUS,
    ArtworkView,
    render_detail_pane,
)
from steamshelf.render.search_bar import render_search_bar
from steamshelf.render.tree_pane import CURSOR_MARKER, render_search_results, render_tree_rows
from steamshelf.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _plain(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def _games() -> list[Game]:
    return [
        Game(10, "Half-Life", ["Action"], 125),
        Game(11, "Doom", ["Action"]),
        Game(20, "Portal", ["Puzzle"]),
    ]


class TreePaneTests(unittest.TestCase):
    def test_exactly_one_row_carries_cursor_marker(self) -> None:
        rows = build_flat_list(build_genre_tree(_games()), {"Action"})

        lines = render_tree_rows(rows, 2, 30, 6, theme=PLAIN_THEME)

        self.assertEqual(len(lines), 6)
        marked = [idx for idx, line in enumerate(lines) if CURSOR_MARKER in line]
        self.assertEqual(marked, [2])
        self.assertTrue(all(display_width(line) == 30 for line in lines))

    def test_header_and_game_labels(self) -> None:
        rows = build_flat_list(build_genre_tree(_games()), {"Action"})

        lines = [line.rstrip() for line in render_tree_rows(rows, 3, 30, 4, theme=PLAIN_THEME)]

        self.assertEqual(lines[0], "▼ Action (2)")
        self.assertEqual(lines[1], "  ├ Doom")
        self.assertEqual(lines[2], "  ├ Half-Life")
        self.assertTrue(lines[3].startswith("▶ Puzzle (1)"))

    def test_long_names_are_truncated_with_ellipsis(self) -> None:
        games = [Game(1, "The Elder Scrolls V: Skyrim Special Edition", ["RPG"])]
        rows = build_flat_list(build_genre_tree(games), {"RPG"})

        lines = render_tree_rows(rows, 0, 20, 2, theme=PLAIN_THEME)

        self.assertIn("…", lines[1])
        self.assertEqual(display_width(lines[1]), 20)

    def test_window_scrolls_to_keep_cursor_visible(self) -> None:
        games = [Game(idx, f"Game {idx:02d}", ["Action"]) for idx in range(10)]
        rows = build_flat_list(build_genre_tree(games), {"Action"})

        lines = render_tree_rows(rows, 9, 30, 4, theme=PLAIN_THEME)

        self.assertIn("Game 08", lines[-1])
        self.assertIn(CURSOR_MARKER, lines[-1])

    def test_styled_rows_keep_exact_width(self) -> None:
        rows = build_flat_list(build_genre_tree(_games()), {"Action", "Puzzle"})
        lines = render_tree_rows(rows, 1, 25, 8, theme=DEFAULT_THEME)
        self.assertTrue(all(display_width(line) == 25 for line in lines))


class SearchResultsTests(unittest.TestCase):
    def test_no_results_message_only_with_query(self) -> None:
        with_query = render_search_results([], "zz", 0, 20, 3, theme=PLAIN_THEME)
        without_query = render_search_results([], "", 0, 20, 3, theme=PLAIN_THEME)

        self.assertEqual(with_query[0].strip(), "No results")
        self.assertEqual([line.strip() for line in without_query], ["", "", ""])

    def test_highlighted_result_is_marked(self) -> None:
        lines = render_search_results(_games(), "o", 1, 20, 3, theme=PLAIN_THEME)

        self.assertNotIn(CURSOR_MARKER, lines[0])
        self.assertIn("Doom", lines[1])
        self.assertIn(CURSOR_MARKER, lines[1])


class SearchBarTests(unittest.TestCase):
    def test_placeholder_outside_search(self) -> None:
        line = render_search_bar(None, 30, theme=PLAIN_THEME)
        self.assertEqual(line.strip(), "Press / to search")
        self.assertEqual(display_width(line), 30)

    def test_empty_query_shows_prompt_without_count(self) -> None:
        self.assertEqual(render_search_bar("", 20, theme=PLAIN_THEME).rstrip(), "/ |")

    def test_query_shows_result_count(self) -> None:
        self.assertEqual(render_search_bar("por", 40, 1, theme=PLAIN_THEME).rstrip(), "/ por|  (1 result)")
        self.assertIn("(3 results)", render_search_bar("a", 40, 3, theme=PLAIN_THEME))

    def test_narrow_bar_is_truncated(self) -> None:
        line = render_search_bar("portal", 8, 2, theme=DEFAULT_THEME)
        self.assertEqual(display_width(line), 8)
        self.assertIn("…", line)


class DetailPaneTests(unittest.TestCase):
    def setUp(self) -> None:
        self.members = [
            FamilyMember("1", "Ana", frozenset({10})),
            FamilyMember("2", "Ben", frozenset()),
        ]

    def test_empty_selection_shows_hint(self) -> None:
        lines = render_detail_pane(None, self.members, 40, 5, theme=PLAIN_THEME)

        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[1].strip(), "Select a game to see details.")

    def test_details_list_every_member_and_owner_count(self) -> None:
        lines = [line.rstrip() for line in render_detail_pane(_games()[0], self.members, 60, 14, theme=PLAIN_THEME)]

        self.assertEqual(lines[0], "  Half-Life")
        self.assertIn("  AppID:    10", lines)
        self.assertIn("  Playtime: 2h 5m", lines)
        ana = next(line for line in lines if "Ana" in line)
        ben = next(line for line in lines if "Ben" in line)
        self.assertIn("✓", ana)
        self.assertTrue(ana.endswith("owned"))
        self.assertIn("✗", ben)
        self.assertTrue(ben.endswith("not owned"))
        self.assertIn("  1 / 2 members own this", lines)

    def test_no_family_members(self) -> None:
        lines = [line.rstrip() for line in render_detail_pane(_games()[1], [], 40, 10, theme=PLAIN_THEME)]
        self.assertIn("  0 / 0 members own this", lines)
        self.assertIn("  Playtime: Never played", lines)

    def test_artwork_states(self) -> None:
        game = _games()[2]

        loading = render_detail_pane(game, [], 40, 12, ArtworkView(ARTWORK_LOADING_STATUS), PLAIN_THEME)
        missing = render_detail_pane(game, [], 40, 12, ArtworkView(ARTWORK_UNAVAILABLE_STATUS), PLAIN_THEME)
        ready = render_detail_pane(game, [], 40, 12, ArtworkView(ARTWORK_READY_STATUS, ("ART1", "ART2")), PLAIN_THEME)
        disabled = render_detail_pane(game, [], 40, 12, None, PLAIN_THEME)

        self.assertEqual(loading[0].strip(), "Loading artwork…")
        self.assertEqual(missing[0].strip(), "No artwork available")
        self.assertEqual([ready[0].strip(), ready[1].strip()], ["ART1", "ART2"])
        self.assertEqual(disabled[0].strip(), "Portal")

    def test_artwork_rows_are_capped_by_pane_height(self) -> None:
        art = tuple(f"ROW{idx}" for idx in range(20))
        lines = render_detail_pane(_games()[2], [], 40, 10, ArtworkView(ARTWORK_READY_STATUS, art), PLAIN_THEME)

        self.assertEqual(sum(1 for line in lines if "ROW" in line), 5)

    def test_narrow_pane_keeps_ownership_labels(self) -> None:
        members = [FamilyMember("1", "Gordon", frozenset({10})), FamilyMember("2", "Alyx Vance", frozenset())]

        lines = [line.rstrip() for line in render_detail_pane(_games()[0], members, 20, 12, theme=PLAIN_THEME)]

        gordon = next(line for line in lines if "✓" in line)
        alyx = next(line for line in lines if "✗" in line)
        self.assertTrue(gordon.endswith("— owned"))
        self.assertTrue(alyx.endswith("— not owned"))
        self.assertTrue(all(display_width(line) <= 20 for line in lines))

    def test_overlong_detail_lines_end_with_ellipsis(self) -> None:
        lines = [line.rstrip() for line in render_detail_pane(_games()[0], self.members, 20, 14, theme=PLAIN_THEME)]

        self.assertIn("  Playtime: 2h 5m", lines)
        self.assertIn("  Family ownership:", lines)
        self.assertIn("  1 / 2 members own…", lines)

    def test_narrow_artwork_placeholder_ends_with_ellipsis(self) -> None:
        lines = render_detail_pane(_games()[2], [], 12, 8, ArtworkView(ARTWORK_UNAVAILABLE_STATUS), PLAIN_THEME)
        self.assertEqual(lines[0], "  No artwor…")

    def test_lines_fit_pane_width(self) -> None:
        lines = render_detail_pane(_games()[0], self.members, 24, 14, theme=DEFAULT_THEME)
        self.assertTrue(all(display_width(line) == 24 for line in lines))
        self.assertIn("Half-Life", _plain(lines[0]))


if __name__ == "__main__":
    unittest.main()
