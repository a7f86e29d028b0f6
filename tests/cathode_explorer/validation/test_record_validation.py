import logging

import pandas as pd
import pytest

from cathode_explorer.validation.errors import ValidationError
from cathode_explorer.validation.record_validation import validate_records, warn_on_invalid_records


def _clean_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "id": [1, 2],
            "formula": ["LiTiS2", "LiTiO2"],
            "base_formula": ["TiS2", "TiO2"],
            "type": ["Sulfide", "Oxide"],
            "voltage": [3.9, 3.4],
            "energy_gravimetric": [3074, 2970],
        }
    )


def test_clean_records_pass():
    validate_records(_clean_frame())
    assert warn_on_invalid_records(_clean_frame(), logging.getLogger("test")) is True


def test_issues_are_collected():
    df = _clean_frame()
    df.loc[1, "id"] = 1
    df.loc[1, "type"] = "Carbide"
    df.loc[0, "voltage"] = float("inf")
    df = df.drop(columns=["base_formula"])

    with pytest.raises(ValidationError) as excinfo:
        validate_records(df)

    codes = [issue.code for issue in excinfo.value.issues]
    assert codes == [
        "RECORD_MISSING_FIELD",
        "RECORD_DUPLICATE_ID",
        "RECORD_UNKNOWN_TYPE",
        "RECORD_INVALID_NUMBER",
    ]
    assert "Carbide" in str(excinfo.value)


def test_warn_on_invalid_records_logs_and_returns_false(caplog):
    df = _clean_frame()
    df["cycle_life"] = [1000, "many"]

    with caplog.at_level(logging.WARNING):
        ok = warn_on_invalid_records(df, logging.getLogger("test"), source="compounds.json")

    assert ok is False
    assert "RECORD_INVALID_NUMBER" in caplog.text
    assert "compounds.json" in caplog.text


def test_issues_name_the_offending_field():
    df = _clean_frame()
    df.loc[0, "voltage"] = None

    with pytest.raises(ValidationError) as excinfo:
        validate_records(df)

    assert excinfo.value.codes == ["RECORD_INVALID_NUMBER"]
    assert [i.field for i in excinfo.value.for_field("voltage")] == ["voltage"]
    assert excinfo.value.for_field("energy_gravimetric") == []
