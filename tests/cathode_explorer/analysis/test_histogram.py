import pandas as pd
import pytest

from cathode_explorer.analysis.histogram import (
    ENERGY_HISTOGRAM,
    VOLTAGE_HISTOGRAM,
    compute_distributions,
    compute_histogram,
)


def _voltage_view(values) -> pd.DataFrame:
    return pd.DataFrame({"id": range(len(values)), "voltage": values})


def test_value_at_domain_max_lands_in_last_bin():
    view = _voltage_view([5.0])
    bins = compute_histogram(view, "voltage", 0.0, 5.0, 15)

    assert len(bins) == 15
    assert bins[14].count == 1
    assert sum(b.count for b in bins) == 1


def test_bins_are_lower_edges_and_counts_sum_to_values():
    view = _voltage_view([0.0, 0.1, 0.34, 0.4, 2.5, 3.9, 4.99, 5.0])
    bins = compute_histogram(view, "voltage", 0.0, 5.0, 15)

    assert bins[0].range_label == "0.0"
    assert bins[1].range_label == "0.3"
    assert bins[14].range_label == "4.7"
    # 0.0, 0.1 in bin 0; 0.34, 0.4 in bin 1
    assert bins[0].count == 2
    assert bins[1].count == 2
    assert bins[7].count == 1
    assert bins[11].count == 1
    assert bins[14].count == 2
    assert sum(b.count for b in bins) == 8


def test_missing_values_are_not_counted():
    view = _voltage_view([1.0, None, float("nan"), 2.0])
    bins = compute_histogram(view, "voltage", 0.0, 5.0)
    assert sum(b.count for b in bins) == 2


def test_out_of_domain_values_are_clamped():
    view = _voltage_view([-1.0, 7.5])
    bins = compute_histogram(view, "voltage", 0.0, 5.0, 5)
    assert [b.count for b in bins] == [1, 0, 0, 0, 1]


def test_empty_view_yields_zero_bins():
    bins = compute_histogram(_voltage_view([]), "voltage", 0.0, 5.0, 15)
    assert len(bins) == 15
    assert all(b.count == 0 for b in bins)


def test_energy_labels_are_whole_numbers():
    view = pd.DataFrame({"energy_gravimetric": [3074.0, 2970.0, 1560.0]})
    bins = compute_histogram(view, "energy_gravimetric", 0.0, 5000.0, 15)

    assert [b.range_label for b in bins[:3]] == ["0", "333", "667"]
    assert bins[9].count == 1
    assert bins[8].count == 1
    assert bins[4].count == 1


@pytest.mark.parametrize("bin_count, lo, hi", [(0, 0.0, 5.0), (15, 5.0, 5.0), (15, 5.0, 0.0)])
def test_invalid_binning_raises(bin_count, lo, hi):
    with pytest.raises(ValueError):
        compute_histogram(_voltage_view([1.0]), "voltage", lo, hi, bin_count)


def test_distributions_for_default_specs():
    view = pd.DataFrame({"voltage": [3.9, 3.4], "energy_gravimetric": [3074.0, 2970.0]})
    out = compute_distributions(view, [VOLTAGE_HISTOGRAM, ENERGY_HISTOGRAM.with_bins(10)])

    assert set(out) == {"voltage", "energy_gravimetric"}
    assert len(out["voltage"]) == 15
    assert len(out["energy_gravimetric"]) == 10
    assert sum(b.count for b in out["voltage"]) == 2
    assert [b.count for b in out["energy_gravimetric"]][5:7] == [1, 1]
