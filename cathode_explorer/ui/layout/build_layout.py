from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from cathode_explorer.core.filter_state import FilterSpec
from cathode_explorer.core.record_store import LoadStatus
from cathode_explorer.ui.ids import IDs
from cathode_explorer.ui.layout.build_detail_modal import build_detail_modal
from cathode_explorer.ui.layout.build_filter_panel import build_filter_panel
from cathode_explorer.ui.layout.build_navbar import build_navbar
from cathode_explorer.ui.layout.build_plot_panel import build_plot_panel
from cathode_explorer.ui.layout.build_stats_panel import build_stats_panel
from cathode_explorer.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from cathode_explorer.ui.config import AppConfig


def _status_banner(ctx: "AppConfig"):
    store = ctx.store
    if store.status is LoadStatus.FAILED:
        return dbc.Alert(
            [html.Strong("Could not load the compound database. "), store.error or ""],
            color="danger",
            id=IDs.Control.STATUS_BANNER,
        )
    if store.status is LoadStatus.LOADING:
        return dbc.Alert("Loading compounds...", color="info", id=IDs.Control.STATUS_BANNER)
    return html.Div(id=IDs.Control.STATUS_BANNER)


def build_layout(ctx: "AppConfig"):
    navbar = build_navbar(ctx.explorer_config, ctx.store)

    if not ctx.store.is_ready:
        # No interaction until the record store is ready
        return dbc.Container(
            fluid=True,
            className="ce-root",
            children=[navbar, html.Div(_status_banner(ctx), className="mt-3")],
        )

    return dbc.Container(
        fluid=True,
        className="ce-root",
        children=[
            navbar,

            # Explorer state, owned here and passed by value into the pipeline
            dcc.Store(id=IDs.Store.FILTER_SPEC, data=FilterSpec.default().to_dict()),
            dcc.Store(id=IDs.Store.PAGE_INDEX, data=1),
            dcc.Store(id=IDs.Store.SELECTED_RECORD, data=None),

            _status_banner(ctx),
            dbc.Row(
                [
                    dbc.Col(build_filter_panel(), md=3, className="mt-3"),
                    dbc.Col(
                        [
                            build_stats_panel(),
                            build_plot_panel(),
                            build_table_panel(),
                        ],
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
            build_detail_modal(),
        ],
    )
