from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from cathode_explorer.core.exceptions import EmptyExportError
from cathode_explorer.ui.helpers import current_view
from cathode_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from cathode_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DOWNLOAD_EXPORT, "data"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.FILTER_SPEC, "data"),
        prevent_initial_call=True,
    )
    def export_filtered_view(n_clicks, spec_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        view = current_view(ctx, spec_data)
        try:
            payload = ctx.export_service.build_export(view)
        except EmptyExportError:
            # The button is disabled for an empty view; a stale click lands here
            logger.warning("Export requested for an empty view", extra={"filter_spec": spec_data})
            raise exceptions.PreventUpdate

        return dcc.send_string(payload.content, payload.filename, type=payload.media_type)
