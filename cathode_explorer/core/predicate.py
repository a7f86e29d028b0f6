from __future__ import annotations

from typing import Any, Tuple

import numpy as np
import pandas as pd

from cathode_explorer.core.filter_state import ALL_TYPES, FilterSpec
from cathode_explorer.core.record import Category, is_finite_number

TEXT_SEARCH_FIELDS: Tuple[str, ...] = ("formula", "base_formula")


def _get(record: Any, name: str) -> Any:
    """Field access for mappings, pandas rows and CompoundRecord alike."""
    getter = getattr(record, "get", None)
    if callable(getter):
        return getter(name)
    return getattr(record, name, None)


def _category_label(value: Any) -> Any:
    return value.value if isinstance(value, Category) else value


def _text_hit(value: Any, needle: str) -> bool:
    return isinstance(value, str) and needle in value.lower()


def _in_range(value: Any, bounds: Tuple[float, float]) -> bool:
    if not is_finite_number(value):
        return False
    lo, hi = bounds
    return lo <= value <= hi


def matches(record: Any, spec: FilterSpec) -> bool:
    """
    Decide whether a single record passes the filter specification.

    The result is the AND of:
    - text: empty search_text, or a case-insensitive substring of formula OR base_formula
    - category: spec.type == "all", or exact equality with the record's type
    - voltage within spec.voltage_range (inclusive)
    - energy_gravimetric within spec.energy_range (inclusive)

    Never raises: a missing or invalid field fails its own check.
    """
    if spec.search_text:
        needle = spec.search_text.lower()
        if not any(_text_hit(_get(record, f), needle) for f in TEXT_SEARCH_FIELDS):
            return False

    if spec.type != ALL_TYPES:
        if _category_label(_get(record, "type")) != _category_label(spec.type):
            return False

    if not _in_range(_get(record, "voltage"), spec.voltage_range):
        return False

    return _in_range(_get(record, "energy_gravimetric"), spec.energy_range)


def _range_mask(frame: pd.DataFrame, column: str, bounds: Tuple[float, float]) -> np.ndarray:
    if column not in frame.columns:
        return np.zeros(len(frame), dtype=bool)
    values = pd.to_numeric(frame[column], errors="coerce").to_numpy(dtype=float)
    lo, hi = bounds
    with np.errstate(invalid="ignore"):
        return np.isfinite(values) & (values >= lo) & (values <= hi)


def filter_mask(frame: pd.DataFrame, spec: FilterSpec) -> np.ndarray:
    """
    Vectorised form of matches() over a whole record table.

    Returns a boolean array aligned with the frame's rows; element i is
    exactly matches(frame.iloc[i], spec).
    """
    n = len(frame)
    mask = np.ones(n, dtype=bool)

    if spec.search_text:
        needle = spec.search_text.lower()
        text_mask = np.zeros(n, dtype=bool)
        for column in TEXT_SEARCH_FIELDS:
            if column in frame.columns:
                hits = frame[column].map(lambda v: _text_hit(v, needle))
                text_mask |= hits.to_numpy(dtype=bool)
        mask &= text_mask

    if spec.type != ALL_TYPES:
        if "type" in frame.columns:
            label = _category_label(spec.type)
            mask &= frame["type"].map(lambda v: _category_label(v) == label).to_numpy(dtype=bool)
        else:
            mask &= False

    mask &= _range_mask(frame, "voltage", spec.voltage_range)
    mask &= _range_mask(frame, "energy_gravimetric", spec.energy_range)

    return mask
