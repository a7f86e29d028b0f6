import pandas as pd
import plotly.graph_objs as go

from cathode_explorer.core.filter_state import PlotOptions
from cathode_explorer.core.record_store import RecordStore
from cathode_explorer.views import DistributionView, ScatterView, TypeComparisonView, TypeDistributionView


def _make_view() -> pd.DataFrame:
    """
    Tiny filtered view with:
    - 4 compounds
    - 3 material types (Sulfide x2, Oxide, Nitride)
    """
    return RecordStore.from_records(
        [
            {"id": 1, "formula": "LiTiS2", "type": "Sulfide", "voltage": 3.9, "energy_gravimetric": 3074, "conductivity": 222, "cycle_life": 62500},
            {"id": 2, "formula": "LiTiO2", "type": "Oxide", "voltage": 3.4, "energy_gravimetric": 2970, "conductivity": 0.000001, "cycle_life": 5000},
            {"id": 3, "formula": "LiTi2S3", "type": "Sulfide", "voltage": 3.7, "energy_gravimetric": 2850, "conductivity": 150, "cycle_life": 45000},
            {"id": 4, "formula": "Li2TiN2", "type": "Nitride", "voltage": 2.9, "energy_gravimetric": 2470, "conductivity": 45.5, "cycle_life": 21000},
        ]
    ).frame


def test_scatter_view_one_trace_per_type_with_record_ids():
    view = ScatterView(_make_view())
    fig = view.figure(PlotOptions())

    assert isinstance(fig, go.Figure)
    assert [t.name for t in fig.data] == ["Sulfide (2)", "Oxide (1)", "Nitride (1)"]
    assert [list(c) for c in fig.data[0].customdata] == [[1], [3]]
    assert fig.layout.xaxis.title.text == "Voltage (V)"
    assert fig.layout.yaxis.title.text == "Energy Density (Wh/kg)"


def test_scatter_view_follows_axis_options():
    fig = ScatterView(_make_view()).figure(PlotOptions(x_axis="conductivity", y_axis="cycle_life"))
    assert list(fig.data[0].y) == [62500.0, 45000.0]
    assert fig.layout.yaxis.title.text == "Cycle Life"


def test_distribution_view_has_two_histograms():
    view = DistributionView(_make_view())
    data = view.compute_data(PlotOptions(histogram_bins=10))

    assert set(data) == {"voltage", "energy_gravimetric"}
    assert all(len(bins) == 10 for bins in data.values())

    fig = view.render_figure(data, PlotOptions(histogram_bins=10))
    assert len(fig.data) == 2
    assert sum(fig.data[0].y) == 4


def test_type_comparison_view_skips_absent_types():
    fig = TypeComparisonView(_make_view()).figure(PlotOptions())

    assert len(fig.data) == 3
    assert list(fig.data[0].x) == ["Sulfide", "Oxide", "Nitride"]
    assert list(fig.data[0].customdata) == [2, 1, 1]


def test_type_distribution_view_pie():
    fig = TypeDistributionView(_make_view()).figure(PlotOptions())

    assert len(fig.data) == 1
    assert list(fig.data[0].values) == [2, 1, 1]
    assert fig.layout.title.text == "Material types: 4 compounds"


def test_views_on_empty_selection_render_empty_figure():
    empty = _make_view().iloc[0:0]
    for view_cls in (ScatterView, DistributionView, TypeComparisonView, TypeDistributionView):
        fig = view_cls(empty).figure(PlotOptions())
        assert len(fig.data) == 0
        assert fig.layout.title.text == "No compounds match your filters"
