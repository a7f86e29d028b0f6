from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State
from dash import ctx as callback_ctx

from cathode_explorer.analysis.inspector import record_sections, record_title
from cathode_explorer.core.filtered_view import find_record
from cathode_explorer.ui.helpers import current_view
from cathode_explorer.ui.ids import IDs
from cathode_explorer.ui.layout.build_detail_modal import render_detail_sections

if TYPE_CHECKING:
    from cathode_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def record_id_from_click(click_data: Optional[dict]) -> Any:
    """Extract the record id carried as customdata by a scatter point."""
    if not click_data:
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    if isinstance(custom, (list, tuple)):
        return custom[0] if custom else None
    return custom


def register_detail_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Store.SELECTED_RECORD, "data"),
        Output(IDs.Control.SCATTER_GRAPH, "clickData"),
        Output(IDs.Control.RECORD_TABLE, "active_cell"),
        Input(IDs.Control.SCATTER_GRAPH, "clickData"),
        Input(IDs.Control.RECORD_TABLE, "active_cell"),
        Input(IDs.Control.DETAIL_CLOSE_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def select_record(click_data, active_cell, _close):
        # Clear the click sources so selecting the same record again re-triggers
        triggered = callback_ctx.triggered_id
        if triggered == IDs.Control.SCATTER_GRAPH:
            return record_id_from_click(click_data), None, None
        if triggered == IDs.Control.RECORD_TABLE and active_cell:
            return active_cell.get("row_id"), None, None
        return None, None, None

    @app.callback(
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.DETAIL_TITLE, "children"),
        Output(IDs.Control.DETAIL_BODY, "children"),
        Input(IDs.Store.SELECTED_RECORD, "data"),
        State(IDs.Store.FILTER_SPEC, "data"),
    )
    def show_record(record_id, spec_data):
        if record_id is None:
            return False, dash.no_update, dash.no_update

        record = find_record(current_view(ctx, spec_data), record_id)
        if record is None:
            logger.info("Selected record not in current view", extra={"record_id": str(record_id)})
            return False, dash.no_update, dash.no_update

        return True, record_title(record), render_detail_sections(record_sections(record))
