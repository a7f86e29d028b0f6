import numpy as np
import pandas as pd
import pytest

from cathode_explorer.analysis.statistics import Stats, compute_stats, field_mean, round_half_up
from cathode_explorer.core.filter_state import FilterSpec
from cathode_explorer.core.filtered_view import compute_view
from cathode_explorer.core.record_store import RecordStore


def _make_view(rows) -> pd.DataFrame:
    return RecordStore.from_records(rows).frame


def test_two_record_view_means():
    view = _make_view(
        [
            {"id": 1, "type": "Sulfide", "voltage": 3.9, "energy_gravimetric": 3074, "cycle_life": 62500, "conductivity": 222},
            {"id": 2, "type": "Oxide", "voltage": 3.4, "energy_gravimetric": 2970, "cycle_life": 5000, "conductivity": 0.000001},
        ]
    )

    stats = compute_stats(view)

    assert stats.count == 2
    assert stats.avg_voltage == pytest.approx(3.65)
    assert stats.avg_energy == pytest.approx(3022)
    assert stats.max_cycles == 62500
    assert stats.avg_conductivity == pytest.approx(111.0000005)

    assert stats.to_display_dict() == {
        "count": "2",
        "avg_voltage": "3.65",
        "avg_energy": "3022",
        "max_cycles": "63k",
        "avg_conductivity": "111.00",
    }


def test_empty_view_has_no_stats():
    store = RecordStore.from_records(
        [
            {"id": 1, "type": "Sulfide", "voltage": 3.9, "energy_gravimetric": 3074},
            {"id": 2, "type": "Oxide", "voltage": 3.4, "energy_gravimetric": 2970},
        ]
    )
    view = compute_view(store, FilterSpec(voltage_range=(4.0, 5.0)))

    assert view.empty
    assert compute_stats(view) is None


def test_singleton_view_stats_equal_the_record():
    view = _make_view(
        [{"id": 9, "type": "Nitride", "voltage": 2.9, "energy_gravimetric": 2470, "cycle_life": 21000, "conductivity": 45.5}]
    )

    stats = compute_stats(view)

    assert stats == Stats(count=1, avg_voltage=2.9, avg_energy=2470.0, max_cycles=21000.0, avg_conductivity=45.5)


def test_means_skip_missing_values():
    view = _make_view(
        [
            {"id": 1, "voltage": 3.0, "energy_gravimetric": 1000, "conductivity": None},
            {"id": 2, "voltage": None, "energy_gravimetric": 2000, "conductivity": None},
        ]
    )

    stats = compute_stats(view)

    assert stats.count == 2
    assert stats.avg_voltage == 3.0
    assert stats.avg_energy == 1500.0
    assert stats.avg_conductivity is None
    assert stats.max_cycles is None
    assert stats.display_avg_conductivity == "n/a"
    assert stats.display_max_cycles == "n/a"


def test_field_mean_of_missing_column_is_none():
    assert field_mean(pd.DataFrame({"a": [1.0]}), "voltage") is None


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (3021.5, 3022), (3021.49, 3021), (0.0, 0), (np.float64(10.5), 11)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
