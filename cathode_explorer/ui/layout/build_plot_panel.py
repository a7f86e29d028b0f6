from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from cathode_explorer.core.filter_state import PlotOptions, SCATTER_X_FIELDS, SCATTER_Y_FIELDS
from cathode_explorer.ui.ids import IDs
from cathode_explorer.views.scatter_view import AXIS_LABELS


def _axis_options(fields):
    return [{"label": AXIS_LABELS.get(f, f), "value": f} for f in fields]


def _graph(graph_id: str, height: str = "600px") -> dcc.Loading:
    return dcc.Loading(
        type="default",
        children=dcc.Graph(id=graph_id, style={"height": height}, config={"responsive": True}),
    )


def build_plot_panel() -> dbc.Card:
    defaults = PlotOptions()

    scatter_tab = html.Div(
        [
            dbc.Row(
                [
                    dbc.Col(
                        [
                            html.Label("X-axis property", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.X_AXIS_SELECT,
                                options=_axis_options(SCATTER_X_FIELDS),
                                value=defaults.x_axis,
                                clearable=False,
                            ),
                        ],
                        md=6,
                    ),
                    dbc.Col(
                        [
                            html.Label("Y-axis property", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.Y_AXIS_SELECT,
                                options=_axis_options(SCATTER_Y_FIELDS),
                                value=defaults.y_axis,
                                clearable=False,
                            ),
                        ],
                        md=6,
                    ),
                ],
                className="mb-2",
            ),
            _graph(IDs.Control.SCATTER_GRAPH),
        ]
    )

    return dbc.Card(
        dbc.CardBody(
            dcc.Tabs(
                id=IDs.Control.PLOT_TABS,
                value="scatter",
                children=[
                    dcc.Tab(label="Scatter Plot", value="scatter", children=[scatter_tab]),
                    dcc.Tab(
                        label="Distribution",
                        value="distribution",
                        children=[_graph(IDs.Control.DISTRIBUTION_GRAPH, "520px")],
                    ),
                    dcc.Tab(
                        label="Comparison",
                        value="comparison",
                        children=[
                            _graph(IDs.Control.COMPARISON_GRAPH, "520px"),
                            _graph(IDs.Control.TYPE_DISTRIBUTION_GRAPH, "470px"),
                        ],
                    ),
                ],
            )
        ),
        className="ce-maincard mb-3",
    )
