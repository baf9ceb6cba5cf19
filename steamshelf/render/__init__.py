"""Frame rendering for the three-pane terminal view.

Each pane renders to a fixed list of lines of exact display width; the frame
module joins them with the search bar and status line.
"""

from __future__ import annotations

from .detail_pane import (
    ARTWORK_LOADING_STATUS,
    ARTWORK_READY_STATUS,
    ARTWORK_UNAVAILABLE_STATUS,
    ArtworkView,
    artwork_columns_budget,
    artwork_rows_budget,
    render_detail_pane,
)
from .frame import (
    FrameGeometry,
    compute_left_width,
    pane_height_for_terminal,
    render_frame,
    render_status_line,
    write_frame,
)
from .search_bar import render_search_bar
from .tree_pane import render_search_results, render_tree_rows

__all__ = [
    "ArtworkView",
    "ARTWORK_LOADING_STATUS",
    "ARTWORK_READY_STATUS",
    "ARTWORK_UNAVAILABLE_STATUS",
    "artwork_columns_budget",
    "artwork_rows_budget",
    "FrameGeometry",
    "compute_left_width",
    "pane_height_for_terminal",
    "render_frame",
    "render_status_line",
    "render_search_bar",
    "render_tree_rows",
    "render_search_results",
    "render_detail_pane",
    "write_frame",
]
