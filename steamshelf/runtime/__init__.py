"""Interactive runtime: terminal control, event loop, and app composition."""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the browser entrypoint to avoid heavy imports."""
    from .app import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


__all__ = ["run_browser"]
