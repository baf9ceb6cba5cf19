"""Tests for the latest-request-wins artwork worker."""

from __future__ import annotations

import threading
import time
import unittest
from pathlib import Path

from steamshelf.artwork import ArtworkPrefetchScheduler
from steamshelf.models import Game


def _wait_for_results(scheduler: ArtworkPrefetchScheduler, count: int, timeout: float = 2.0) -> list:
    deadline = time.monotonic() + timeout
    results: list = []
    while time.monotonic() < deadline:
        results.extend(scheduler.drain_results())
        if len(results) >= count:
            break
        time.sleep(0.01)
    return results


class ArtworkPrefetchSchedulerTests(unittest.TestCase):
    def test_result_carries_rendered_lines(self) -> None:
        scheduler = ArtworkPrefetchScheduler(
            fetch=lambda game: Path(f"/cache/{game.appid}.jpg"),
            render=lambda path, width, height: [f"{path.name}:{width}x{height}"],
        )

        request = scheduler.schedule(Game(620, "Portal 2"), 10, 4)
        results = _wait_for_results(scheduler, 1)

        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].request, request)
        self.assertEqual(results[0].lines, ("620.jpg:10x4",))
        self.assertEqual(request.key, (620, 10, 4))

    def test_missing_artwork_yields_none_lines(self) -> None:
        scheduler = ArtworkPrefetchScheduler(fetch=lambda game: None, render=lambda *args: ["unused"])

        scheduler.schedule(Game(1, "x"), 5, 5)
        results = _wait_for_results(scheduler, 1)

        self.assertIsNone(results[0].lines)

    def test_worker_exception_becomes_empty_result(self) -> None:
        def explode(game: Game) -> Path:
            raise RuntimeError("boom")

        scheduler = ArtworkPrefetchScheduler(fetch=explode, render=lambda *args: ["unused"])

        with self.assertLogs("steamshelf.artwork.prefetch", level="ERROR"):
            scheduler.schedule(Game(1, "x"), 5, 5)
            results = _wait_for_results(scheduler, 1)

        self.assertEqual(len(results), 1)
        self.assertIsNone(results[0].lines)

    def test_newer_request_replaces_pending_one(self) -> None:
        started = threading.Event()
        release = threading.Event()
        seen: list[int] = []

        def fetch(game: Game) -> Path:
            seen.append(game.appid)
            if game.appid == 1:
                started.set()
                release.wait(2.0)
            return Path(f"{game.appid}.jpg")

        scheduler = ArtworkPrefetchScheduler(fetch=fetch, render=lambda path, w, h: [path.name])
        scheduler.schedule(Game(1, "first"), 5, 5)
        self.assertTrue(started.wait(2.0))
        scheduler.schedule(Game(2, "second"), 5, 5)
        latest = scheduler.schedule(Game(3, "third"), 5, 5)
        release.set()

        results = _wait_for_results(scheduler, 2)

        self.assertEqual(seen, [1, 3])
        self.assertEqual(results[-1].request, latest)
        self.assertGreater(latest.request_id, results[0].request.request_id)


if __name__ == "__main__":
    unittest.main()
