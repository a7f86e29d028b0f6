from __future__ import annotations

from typing import List

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from cathode_explorer.analysis.category_stats import CategoryStats, compute_category_stats
from cathode_explorer.core.base_view import BaseView
from cathode_explorer.core.filter_state import PlotOptions

# (attribute, subplot title)
_METRICS = (
    ("avg_voltage", "Avg. voltage (V)"),
    ("avg_energy", "Avg. energy (Wh/kg)"),
    ("avg_conductivity", "Avg. conductivity (mS/cm)"),
)


class TypeComparisonView(BaseView):
    """
    Per material type averages of voltage, energy and conductivity.

    Types with no compounds in the current selection are left out.
    """

    id = "type_comparison"
    label = "Type Comparison"

    def compute_data(self, options: PlotOptions) -> List[CategoryStats]:
        return compute_category_stats(self.records)

    def render_figure(self, data: List[CategoryStats], options: PlotOptions) -> go.Figure:
        if not data:
            return self.empty_figure("No compounds match your filters")

        fig = make_subplots(
            rows=1,
            cols=len(_METRICS),
            subplot_titles=[title for _, title in _METRICS],
        )

        types = [s.category.value for s in data]
        for col, (attr, title) in enumerate(_METRICS, start=1):
            fig.add_bar(
                x=types,
                y=[getattr(s, attr) for s in data],
                customdata=[s.count for s in data],
                hovertemplate="%{x}<br>%{y:.2f}<br>%{customdata} compounds<extra></extra>",
                name=title,
                row=1,
                col=col,
            )

        fig.update_layout(
            height=500,
            margin=dict(l=40, r=40, t=60, b=40),
            showlegend=False,
        )
        return fig
