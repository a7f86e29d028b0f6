from __future__ import annotations

from cathode_explorer.core.filter_state import ALL_TYPES, FilterSpec, PlotOptions
from cathode_explorer.core.record import Category


def test_filter_spec_to_from_dict_roundtrip():
    spec = FilterSpec(
        search_text="tis",
        type=Category.SULFIDE,
        voltage_range=(3.0, 4.0),
        energy_range=(1000.0, 3500.0),
    )

    raw = spec.to_dict()
    assert raw["type"] == "Sulfide"
    assert raw["voltage_range"] == [3.0, 4.0]

    assert FilterSpec.from_dict(raw) == spec


def test_filter_spec_defaults_and_reset():
    spec = FilterSpec.default()
    assert spec.search_text == ""
    assert spec.type == ALL_TYPES
    assert spec.voltage_range == (0.0, 5.0)
    assert spec.energy_range == (0.0, 5000.0)
    assert spec.is_default

    changed = spec.with_changes(search_text="Se")
    assert not changed.is_default
    assert spec.search_text == ""
    assert changed.reset() == FilterSpec.default()


def test_filter_spec_from_dict_sanitises_input():
    assert FilterSpec.from_dict(None) == FilterSpec.default()

    spec = FilterSpec.from_dict(
        {
            "search_text": None,
            "type": "Carbide",
            "voltage_range": [4, 2],
            "energy_range": "garbage",
        }
    )
    assert spec.search_text == ""
    assert spec.type == ALL_TYPES
    assert spec.voltage_range == (2.0, 4.0)
    assert spec.energy_range == (0.0, 5000.0)


def test_plot_options_fall_back_to_default_axes():
    opts = PlotOptions.from_dict({"x_axis": "bandgap", "y_axis": "cycle_life", "histogram_bins": 10})
    assert opts == PlotOptions(x_axis="bandgap", y_axis="cycle_life", histogram_bins=10)

    # y-only field offered as x is rejected
    opts = PlotOptions.from_dict({"x_axis": "energy_gravimetric", "y_axis": "voltage"})
    assert opts.x_axis == "voltage"
    assert opts.y_axis == "energy_gravimetric"
    assert opts.histogram_bins == 15

    assert PlotOptions.from_dict(opts.to_dict()) == opts
