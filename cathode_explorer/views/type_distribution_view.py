from __future__ import annotations

from typing import List

import plotly.graph_objects as go

from cathode_explorer.analysis.category_stats import CategoryCount, compute_type_distribution
from cathode_explorer.core.base_view import BaseView
from cathode_explorer.core.filter_state import PlotOptions


class TypeDistributionView(BaseView):
    """Share of each material type in the current selection."""

    id = "type_distribution"
    label = "Type Distribution"

    def compute_data(self, options: PlotOptions) -> List[CategoryCount]:
        return compute_type_distribution(self.records)

    def render_figure(self, data: List[CategoryCount], options: PlotOptions) -> go.Figure:
        if not data:
            return self.empty_figure("No compounds match your filters")

        fig = go.Figure(
            go.Pie(
                labels=[c.category.value for c in data],
                values=[c.count for c in data],
                hole=0.4,
                sort=False,
            )
        )
        fig.update_layout(
            height=450,
            margin=dict(l=40, r=40, t=60, b=40),
            title=f"Material types: {sum(c.count for c in data)} compounds",
        )
        return fig
