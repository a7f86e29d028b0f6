from __future__ import annotations

import math
from enum import Enum
from typing import Any, List

import numpy as np
import pandas as pd

DELIMITER = ","
LINE_SEPARATOR = "\n"


def natural_text(value: Any) -> str:
    """
    Natural text form of a single value.

    Missing values (None, NaN, pd.NA) become empty text; integral floats drop
    their trailing ".0" (3074.0 -> "3074") so whole-number fields read the way
    they were recorded.
    """
    if value is None or value is pd.NA:
        return ""
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return ""
        if math.isfinite(value) and float(value).is_integer():
            return str(int(value))
        return repr(float(value))
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def to_delimited_text(view: pd.DataFrame) -> str:
    """
    Serialise the filtered view as comma-delimited text.

    First line: the view's field names in column order. Then one line per
    record, in view order. Values are written in their natural text form
    without quoting or escaping; the dataset's values never contain the
    delimiter.

    Callers must not invoke this on an empty view (see ExportService).
    """
    columns: List[str] = [str(c) for c in view.columns]
    lines = [DELIMITER.join(columns)]
    for row in view.itertuples(index=False, name=None):
        lines.append(DELIMITER.join(natural_text(v) for v in row))
    return LINE_SEPARATOR.join(lines)
