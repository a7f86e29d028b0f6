from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, html

from cathode_explorer.ui.helpers import TABLE_COLUMNS
from cathode_explorer.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Data Table", className="fw-semibold"),
            dbc.CardBody(
                [
                    dash_table.DataTable(
                        id=IDs.Control.RECORD_TABLE,
                        data=[],
                        columns=[{"name": label, "id": column} for column, label in TABLE_COLUMNS],
                        style_table={"overflowX": "auto"},
                        style_as_list_view=True,
                        style_cell={
                            "fontSize": "12px",
                            "padding": "6px 8px",
                            "textAlign": "left",
                            "cursor": "pointer",
                        },
                        style_header={
                            "fontWeight": "600",
                            "backgroundColor": "#f3f4f6",
                            "borderBottom": "1px solid #e5e7eb",
                        },
                        sort_action="none",
                        filter_action="none",
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Previous",
                                id=IDs.Control.PAGE_PREV_BTN,
                                size="sm",
                                color="secondary",
                                outline=True,
                                disabled=True,
                            ),
                            html.Span(id=IDs.Control.PAGE_LABEL, className="mx-3 text-muted"),
                            dbc.Button(
                                "Next",
                                id=IDs.Control.PAGE_NEXT_BTN,
                                size="sm",
                                color="secondary",
                                outline=True,
                                disabled=True,
                            ),
                        ],
                        className="d-flex justify-content-center align-items-center mt-3",
                    ),
                ]
            ),
        ],
        className="mb-3",
    )
