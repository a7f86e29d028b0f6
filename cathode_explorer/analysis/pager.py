from __future__ import annotations

import math

import pandas as pd

DEFAULT_PAGE_SIZE = 12


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


def page(view: pd.DataFrame, page_index: int, page_size: int = DEFAULT_PAGE_SIZE) -> pd.DataFrame:
    """
    Return the records of 1-based page `page_index`.

    The slice [(page_index - 1) * page_size, + page_size) is clamped to the
    view. Out-of-range indices (past the end, or below 1) give an empty page;
    the pager never wraps and never raises for them.
    """
    _check_page_size(page_size)
    if page_index < 1:
        return view.iloc[0:0]

    start = (page_index - 1) * page_size
    if start >= len(view):
        return view.iloc[0:0]
    return view.iloc[start:start + page_size]


def total_pages(view: pd.DataFrame, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """ceil(len(view) / page_size); 0 for an empty view."""
    _check_page_size(page_size)
    return math.ceil(len(view) / page_size)


def clamp_page(page_index: int, n_pages: int) -> int:
    """
    UI-side clamp of a page index into [1, n_pages].

    With zero pages (empty view) this returns 1; callers show the empty state
    rather than "page 1 of 0".
    """
    if n_pages <= 0:
        return 1
    return max(1, min(int(page_index), n_pages))
