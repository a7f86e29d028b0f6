from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from cathode_explorer.config.model import ExplorerConfig
from cathode_explorer.core.record_store import RecordStore
from cathode_explorer.ui.ids import IDs


def build_navbar(explorer_config: ExplorerConfig, store: RecordStore) -> dbc.Navbar:
    title = explorer_config.ui_title
    subtitle = explorer_config.subtitle

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id="navbar-subtitle"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Database", className="navbar-dataset-title"),
                        html.Div(
                            f"{len(store)} compounds",
                            id=IDs.Control.SELECTION_COUNT,
                            className="navbar-dataset-subtitle",
                        ),
                    ],
                    className="ms-auto text-end",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm ce-navbar",
    )
