from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from cathode_explorer.core.filter_state import (
    ALL_TYPES,
    DEFAULT_ENERGY_RANGE,
    DEFAULT_VOLTAGE_RANGE,
)
from cathode_explorer.ui.helpers import type_options
from cathode_explorer.ui.ids import IDs


def build_filter_panel() -> dbc.Card:
    v_lo, v_hi = DEFAULT_VOLTAGE_RANGE
    e_lo, e_hi = DEFAULT_ENERGY_RANGE

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Search formula", className="form-label"),
                    dcc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="text",
                        value="",
                        debounce=True,
                        placeholder="e.g. TiS2, LiTiO",
                        className="form-control mb-3",
                    ),
                    html.Label("Material type", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.TYPE_SELECT,
                        options=type_options(),
                        value=ALL_TYPES,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Label("Voltage (V)", className="form-label"),
                    dcc.RangeSlider(
                        id=IDs.Control.VOLTAGE_RANGE,
                        min=v_lo,
                        max=v_hi,
                        step=0.1,
                        value=[v_lo, v_hi],
                        marks={i: str(i) for i in range(int(v_lo), int(v_hi) + 1)},
                        tooltip={"placement": "bottom"},
                        className="mb-3",
                    ),
                    html.Label("Energy density (Wh/kg)", className="form-label"),
                    dcc.RangeSlider(
                        id=IDs.Control.ENERGY_RANGE,
                        min=e_lo,
                        max=e_hi,
                        step=50,
                        value=[e_lo, e_hi],
                        marks={i: str(i) for i in range(int(e_lo), int(e_hi) + 1, 1000)},
                        tooltip={"placement": "bottom"},
                        className="mb-3",
                    ),
                    html.Small(id=IDs.Control.FILTER_SUMMARY, className="text-muted d-block mb-3"),
                    html.Div(
                        [
                            dbc.Button(
                                "Reset filters",
                                id=IDs.Control.RESET_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                            ),
                            dbc.Button(
                                "Export CSV",
                                id=IDs.Control.EXPORT_BTN,
                                color="primary",
                                size="sm",
                                disabled=True,
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_EXPORT),
                        ],
                        className="d-flex justify-content-between",
                    ),
                ]
            ),
        ],
        className="ce-sidebar",
    )
