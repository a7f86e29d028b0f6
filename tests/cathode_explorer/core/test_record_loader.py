import json
import logging
from pathlib import Path

import pytest

from cathode_explorer.core.exceptions import DatasetLoadError
from cathode_explorer.core.record_loader import load_record_store, read_records
from cathode_explorer.core.record_store import LoadStatus


def _write_json(tmp_path: Path, payload, name: str = "compounds_data.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload))
    return path


def test_load_record_store_from_json_array(tmp_path):
    path = _write_json(
        tmp_path,
        [
            {"id": 1, "formula": "LiTiS2", "base_formula": "TiS2", "type": "Sulfide", "voltage": 3.9, "energy_gravimetric": 3074},
            {"id": 2, "formula": "LiTiO2", "base_formula": "TiO2", "type": "Oxide", "voltage": 3.4, "energy_gravimetric": 2970},
        ],
    )

    store = load_record_store(path)

    assert store.status is LoadStatus.READY
    assert len(store) == 2
    assert store.source == str(path)
    assert store.frame["formula"].tolist() == ["LiTiS2", "LiTiO2"]


def test_load_record_store_keeps_invalid_records_and_warns(tmp_path, caplog):
    path = _write_json(
        tmp_path,
        [
            {"id": 1, "formula": "LiTiS2", "base_formula": "TiS2", "type": "Sulfide", "voltage": 3.9, "energy_gravimetric": 3074},
            {"id": 1, "formula": "LiTiX", "base_formula": "TiX", "type": "Mystery", "voltage": "high", "energy_gravimetric": 10},
        ],
    )

    with caplog.at_level(logging.WARNING):
        store = load_record_store(path)

    assert store.is_ready
    assert len(store) == 2
    assert "RECORD_DUPLICATE_ID" in caplog.text
    assert "RECORD_UNKNOWN_TYPE" in caplog.text


def test_missing_file_gives_failed_store(tmp_path):
    store = load_record_store(tmp_path / "nope.json")

    assert store.status is LoadStatus.FAILED
    assert len(store) == 0
    assert "not found" in store.error


def test_invalid_json_gives_failed_store(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{\"id\": 1,")

    store = load_record_store(path)

    assert store.status is LoadStatus.FAILED
    assert "not valid JSON" in store.error


@pytest.mark.parametrize("payload", [{"id": 1}, [{"id": 1}, 3], "text"])
def test_read_records_rejects_non_record_arrays(tmp_path, payload):
    path = _write_json(tmp_path, payload)
    with pytest.raises(DatasetLoadError):
        read_records(path)


def test_read_records_accepts_empty_array(tmp_path):
    path = _write_json(tmp_path, [])
    assert read_records(path) == []
