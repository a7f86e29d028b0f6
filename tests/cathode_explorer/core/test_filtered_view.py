from cathode_explorer.core.filter_state import FilterSpec
from cathode_explorer.core.filtered_view import compute_view, find_record
from cathode_explorer.core.predicate import matches
from cathode_explorer.core.record import Category
from cathode_explorer.core.record_store import RecordStore


def _make_store() -> RecordStore:
    rows = []
    types = ["Sulfide", "Oxide", "Phosphate"]
    for i in range(30):
        rows.append(
            {
                "id": i + 1,
                "formula": f"LiTi{i}S2" if i % 3 == 0 else f"LiTi{i}O2",
                "base_formula": f"Ti{i}",
                "type": types[i % 3],
                "voltage": 1.0 + (i % 10) * 0.4,
                "energy_gravimetric": 500.0 + i * 200.0,
                "cycle_life": 1000 * (i + 1),
            }
        )
    return RecordStore.from_records(rows)


def test_view_is_ordered_subset_of_store():
    store = _make_store()
    spec = FilterSpec(voltage_range=(2.0, 4.0), energy_range=(1000.0, 3000.0))

    view = compute_view(store, spec)

    assert 0 < len(view) < len(store)
    # index labels and order come from the store
    assert list(view.index) == sorted(view.index)
    assert set(view.index) <= set(store.frame.index)
    assert all(matches(row, spec) for _, row in view.iterrows())

    excluded = store.frame.drop(index=view.index)
    assert not any(matches(row, spec) for _, row in excluded.iterrows())


def test_default_spec_keeps_every_in_range_record():
    store = _make_store()
    view = compute_view(store, FilterSpec.default())
    # energies above 5000 Wh/kg fall outside the default range
    assert view["energy_gravimetric"].max() <= 5000.0
    assert len(view) == 30 - 7


def test_compute_view_is_idempotent_and_leaves_store_untouched():
    store = _make_store()
    before = store.frame.copy()
    spec = FilterSpec(type=Category.OXIDE)

    first = compute_view(store, spec)
    second = compute_view(store, spec)

    assert first.equals(second)
    assert store.frame.equals(before)
    assert set(first["type"]) == {"Oxide"}


def test_compute_view_accepts_a_plain_frame():
    store = _make_store()
    spec = FilterSpec(search_text="s2")
    assert compute_view(store.frame, spec).equals(compute_view(store, spec))


def test_empty_view_is_valid():
    store = _make_store()
    view = compute_view(store, FilterSpec(search_text="no-such-formula"))
    assert view.empty
    assert list(view.columns) == list(store.frame.columns)


def test_find_record_by_id_text():
    store = _make_store()
    view = compute_view(store, FilterSpec(type=Category.SULFIDE))

    rec = find_record(view, "4")
    assert rec is not None
    assert rec.id == 4
    assert rec.type is Category.SULFIDE

    # id 2 is an Oxide, not in the view
    assert find_record(view, 2) is None
    assert find_record(view, None) is None
