from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from cathode_explorer.core.filter_state import (
    ALL_TYPES,
    DEFAULT_ENERGY_RANGE,
    DEFAULT_VOLTAGE_RANGE,
    FilterSpec,
)
from cathode_explorer.ui.helpers import build_spec_from_controls, current_view, filter_summary
from cathode_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from cathode_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Controls -> FilterSpec store (replaced wholesale on every change)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_SPEC, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        Input(IDs.Control.VOLTAGE_RANGE, "value"),
        Input(IDs.Control.ENERGY_RANGE, "value"),
    )
    def sync_filter_spec(search_text, type_value, voltage_range, energy_range) -> dict[str, Any]:
        spec_data = build_spec_from_controls(search_text, type_value, voltage_range, energy_range)
        logger.debug("filter_spec_updated", extra={"filter_spec": spec_data})
        return spec_data

    # ---------------------------------------------------------
    # Reset: controls back to defaults (the store follows via sync_filter_spec)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.TYPE_SELECT, "value"),
        Output(IDs.Control.VOLTAGE_RANGE, "value"),
        Output(IDs.Control.ENERGY_RANGE, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(_n_clicks):
        return "", ALL_TYPES, list(DEFAULT_VOLTAGE_RANGE), list(DEFAULT_ENERGY_RANGE)

    # ---------------------------------------------------------
    # Selection summary + export availability
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.FILTER_SUMMARY, "children"),
        Output(IDs.Control.SELECTION_COUNT, "children"),
        Output(IDs.Control.EXPORT_BTN, "disabled"),
        Output(IDs.Control.EXPORT_BTN, "children"),
        Input(IDs.Store.FILTER_SPEC, "data"),
    )
    def update_selection_summary(spec_data: dict[str, Any] | None):
        view = current_view(ctx, spec_data)
        spec = FilterSpec.from_dict(spec_data)
        n_selected, n_total = len(view), len(ctx.store)

        export_disabled = not ctx.export_service.can_export(view)
        return (
            filter_summary(spec, n_selected, n_total),
            f"{n_selected} of {n_total} compounds",
            export_disabled,
            f"Export CSV ({n_selected})",
        )
