import math

import pandas as pd

from cathode_explorer.core.record import CompoundRecord, RECORD_FIELDS
from cathode_explorer.core.record_store import LoadStatus, RecordStore, build_record_frame


def _raw_records():
    return [
        {"id": 1, "formula": "LiTiS2", "type": "Sulfide", "voltage": 3.9, "energy_gravimetric": 3074, "note": "a"},
        {"id": 2, "formula": "LiTiO2", "type": "Carbide", "voltage": float("inf"), "energy_gravimetric": "n/a"},
        {"id": 3, "formula": None, "voltage": 2.1},
    ]


def test_build_record_frame_orders_and_coerces_columns():
    df = build_record_frame(pd.DataFrame.from_records(_raw_records()))

    # known fields first, extras after
    assert list(df.columns) == list(RECORD_FIELDS) + ["note"]
    assert list(df.index) == [0, 1, 2]

    assert df.loc[0, "voltage"] == 3.9
    assert math.isnan(df.loc[1, "voltage"])
    assert math.isnan(df.loc[1, "energy_gravimetric"])
    assert math.isnan(df.loc[2, "capacity"])

    assert df.loc[0, "type"] == "Sulfide"
    assert df.loc[1, "type"] is None
    assert df.loc[2, "type"] is None
    assert df.loc[2, "formula"] is None


def test_store_from_records_is_ready():
    store = RecordStore.from_records(_raw_records(), source="memory")

    assert store.status is LoadStatus.READY
    assert store.is_ready
    assert store.error is None
    assert store.source == "memory"
    assert len(store) == 3
    assert store.columns[: len(RECORD_FIELDS)] == list(RECORD_FIELDS)


def test_store_records_are_compound_records():
    store = RecordStore.from_records(_raw_records())
    records = store.records()

    assert all(isinstance(r, CompoundRecord) for r in records)
    assert [r.id for r in records] == [1, 2, 3]
    assert records[1].voltage is None
    assert records[1].type is None


def test_loading_and_failed_stores_are_empty():
    loading = RecordStore.loading()
    assert loading.status is LoadStatus.LOADING
    assert not loading.is_ready
    assert len(loading) == 0
    assert list(loading.frame.columns) == list(RECORD_FIELDS)

    failed = RecordStore.failed("boom", source="x.json")
    assert failed.status is LoadStatus.FAILED
    assert failed.error == "boom"
    assert len(failed) == 0
    assert "failed" in repr(failed)
