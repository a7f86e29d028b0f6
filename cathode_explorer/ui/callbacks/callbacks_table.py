from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
from dash import Input, Output, State
from dash import ctx as callback_ctx

from cathode_explorer.analysis.pager import clamp_page, page, total_pages
from cathode_explorer.ui.helpers import current_view, table_rows
from cathode_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from cathode_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def next_page_index(triggered_id: Optional[str], current: Optional[int], n_pages: int) -> int:
    """
    Pure helper: apply a prev/next click (or a selection change) to the page
    index, clamped to the available pages.
    """
    current = current or 1
    if triggered_id == IDs.Control.PAGE_PREV_BTN:
        current -= 1
    elif triggered_id == IDs.Control.PAGE_NEXT_BTN:
        current += 1
    return clamp_page(current, n_pages)


def page_label(page_index: int, n_pages: int, n_records: int) -> str:
    if n_pages == 0:
        return "No compounds to show"
    return f"Page {page_index} of {n_pages} | Total: {n_records} compounds"


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    page_size = ctx.explorer_config.page_size

    @app.callback(
        Output(IDs.Store.PAGE_INDEX, "data"),
        Input(IDs.Control.PAGE_PREV_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_NEXT_BTN, "n_clicks"),
        Input(IDs.Store.FILTER_SPEC, "data"),
        State(IDs.Store.PAGE_INDEX, "data"),
    )
    def update_page_index(_prev, _next, spec_data, current):
        view = current_view(ctx, spec_data)
        return next_page_index(callback_ctx.triggered_id, current, total_pages(view, page_size))

    @app.callback(
        Output(IDs.Control.RECORD_TABLE, "data"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PAGE_PREV_BTN, "disabled"),
        Output(IDs.Control.PAGE_NEXT_BTN, "disabled"),
        Input(IDs.Store.PAGE_INDEX, "data"),
        State(IDs.Store.FILTER_SPEC, "data"),
    )
    def update_table(page_index, spec_data):
        view = current_view(ctx, spec_data)
        n_pages = total_pages(view, page_size)
        page_index = page_index or 1

        rows = table_rows(page(view, page_index, page_size))
        return (
            rows,
            page_label(page_index, n_pages, len(view)),
            page_index <= 1,
            page_index >= n_pages,
        )
