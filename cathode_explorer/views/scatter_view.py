from __future__ import annotations

from typing import List

import plotly.graph_objects as go

from cathode_explorer.analysis.scatter import ScatterSeries, compute_scatter_series
from cathode_explorer.core.base_view import BaseView
from cathode_explorer.core.filter_state import PlotOptions

AXIS_LABELS = {
    "voltage": "Voltage (V)",
    "capacity": "Capacity (mAh/g)",
    "conductivity": "Conductivity (mS/cm)",
    "stability": "Stability",
    "volume_expansion": "Volume Expansion (%)",
    "bandgap": "Bandgap (eV)",
    "energy_gravimetric": "Energy Density (Wh/kg)",
    "energy_volumetric": "Volumetric Energy (Wh/L)",
    "cycle_life": "Cycle Life",
    "rate_capability": "Rate Capability (%)",
    "coulombic_efficiency": "Coulombic Efficiency (%)",
}


class ScatterView(BaseView):
    """
    Property scatter plot: one trace per material type.

    Each point carries its record id as customdata so a click can open the
    record details.
    """

    id = "scatter"
    label = "Scatter Plot"

    def compute_data(self, options: PlotOptions) -> List[ScatterSeries]:
        return compute_scatter_series(self.records, options.x_axis, options.y_axis)

    def render_figure(self, data: List[ScatterSeries], options: PlotOptions) -> go.Figure:
        if not data:
            return self.empty_figure("No compounds match your filters")

        x_label = AXIS_LABELS.get(options.x_axis, options.x_axis)
        y_label = AXIS_LABELS.get(options.y_axis, options.y_axis)

        fig = go.Figure()
        for series in data:
            fig.add_trace(
                go.Scattergl(
                    x=series.x,
                    y=series.y,
                    mode="markers",
                    name=f"{series.category.value} ({series.count})",
                    text=series.formulas,
                    customdata=[[record_id] for record_id in series.ids],
                    hovertemplate=(
                        "<b>%{text}</b><br>"
                        f"{x_label}: %{{x:.2f}}<br>"
                        f"{y_label}: %{{y:.2f}}<extra></extra>"
                    ),
                )
            )

        fig.update_layout(
            height=600,
            margin=dict(l=60, r=40, t=40, b=60),
            xaxis_title=x_label,
            yaxis_title=y_label,
            legend_title="Type",
            clickmode="event",
        )
        return fig
