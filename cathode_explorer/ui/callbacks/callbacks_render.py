from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from cathode_explorer.analysis.statistics import compute_stats
from cathode_explorer.core.filter_state import PlotOptions
from cathode_explorer.ui.helpers import current_view
from cathode_explorer.ui.ids import IDs
from cathode_explorer.ui.layout.build_stats_panel import render_stats_cards

if TYPE_CHECKING:
    from cathode_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def render_view(ctx: AppConfig, view_id: str, spec_data: dict[str, Any] | None, options: PlotOptions) -> go.Figure:
    """FilterSpec -> filtered view -> registered plot view -> figure."""
    if view_id not in ctx.registry:
        logger.warning("Unknown view requested", extra={"view_id": view_id})
        return _error_figure(f"There is no '{view_id}' view.")

    try:
        view = current_view(ctx, spec_data)
        if view.empty:
            return _message_figure(
                "No compounds match your filters.",
                "Try adjusting the search text, material type or ranges.",
            )

        plot_view = ctx.registry.create(view_id, view)
        return plot_view.figure(options)
    except Exception:
        logger.exception(
            "Error while rendering view",
            extra={"view_id": view_id, "filter_spec": spec_data},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    bins = ctx.explorer_config.histogram_bins

    @app.callback(
        Output(IDs.Control.STATS_CARDS, "children"),
        Input(IDs.Store.FILTER_SPEC, "data"),
    )
    def update_stats(spec_data):
        return render_stats_cards(compute_stats(current_view(ctx, spec_data)))

    @app.callback(
        Output(IDs.Control.SCATTER_GRAPH, "figure"),
        Input(IDs.Store.FILTER_SPEC, "data"),
        Input(IDs.Control.X_AXIS_SELECT, "value"),
        Input(IDs.Control.Y_AXIS_SELECT, "value"),
    )
    def update_scatter(spec_data, x_axis, y_axis):
        options = PlotOptions.from_dict({"x_axis": x_axis, "y_axis": y_axis, "histogram_bins": bins})
        return render_view(ctx, "scatter", spec_data, options)

    @app.callback(
        Output(IDs.Control.DISTRIBUTION_GRAPH, "figure"),
        Input(IDs.Store.FILTER_SPEC, "data"),
    )
    def update_distribution(spec_data):
        return render_view(ctx, "distribution", spec_data, PlotOptions(histogram_bins=bins))

    @app.callback(
        Output(IDs.Control.COMPARISON_GRAPH, "figure"),
        Output(IDs.Control.TYPE_DISTRIBUTION_GRAPH, "figure"),
        Input(IDs.Store.FILTER_SPEC, "data"),
    )
    def update_comparison(spec_data):
        options = PlotOptions(histogram_bins=bins)
        return (
            render_view(ctx, "type_comparison", spec_data, options),
            render_view(ctx, "type_distribution", spec_data, options),
        )
