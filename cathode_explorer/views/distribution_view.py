from __future__ import annotations

from typing import Dict, List

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from cathode_explorer.analysis.histogram import DEFAULT_HISTOGRAMS, HistogramBin, histogram_for_spec
from cathode_explorer.core.base_view import BaseView
from cathode_explorer.core.filter_state import PlotOptions


class DistributionView(BaseView):
    """
    Frequency distributions of voltage and gravimetric energy density.

    Bins are fixed by configuration (domain + bin count), so the histograms of
    two different selections line up bin for bin.
    """

    id = "distribution"
    label = "Distribution"

    def compute_data(self, options: PlotOptions) -> Dict[str, List[HistogramBin]]:
        return {
            spec.field: histogram_for_spec(self.records, spec.with_bins(options.histogram_bins))
            for spec in DEFAULT_HISTOGRAMS
        }

    def render_figure(self, data: Dict[str, List[HistogramBin]], options: PlotOptions) -> go.Figure:
        if not data or self.records.empty:
            return self.empty_figure("No compounds match your filters")

        fig = make_subplots(
            rows=1,
            cols=len(DEFAULT_HISTOGRAMS),
            subplot_titles=[f"{spec.label} distribution" for spec in DEFAULT_HISTOGRAMS],
        )

        for col, spec in enumerate(DEFAULT_HISTOGRAMS, start=1):
            bins = data.get(spec.field, [])
            fig.add_bar(
                x=[b.range_label for b in bins],
                y=[b.count for b in bins],
                name=spec.label,
                row=1,
                col=col,
            )
            fig.update_xaxes(title_text=spec.label, type="category", row=1, col=col)
            fig.update_yaxes(title_text="# compounds", row=1, col=col)

        fig.update_layout(
            height=500,
            margin=dict(l=40, r=40, t=60, b=40),
            showlegend=False,
        )
        return fig
