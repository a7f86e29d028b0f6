from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import numpy as np
import pandas as pd

from cathode_explorer.core.filter_state import SCATTER_X_FIELDS, SCATTER_Y_FIELDS
from cathode_explorer.core.record import CATEGORIES, Category


@dataclass
class ScatterSeries:
    """Points of one category for the property scatter plot."""

    category: Category
    ids: List[Any] = field(default_factory=list)
    formulas: List[str] = field(default_factory=list)
    x: List[float] = field(default_factory=list)
    y: List[float] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.ids)


def compute_scatter_series(view: pd.DataFrame, x_field: str, y_field: str) -> List[ScatterSeries]:
    """
    Split the view into per-category (x, y) series for the chosen axes.

    Records missing either axis value are skipped; categories with no
    plottable points are omitted.

    Raises:
        ValueError: if x_field / y_field is not an offered scatter axis
    """
    if x_field not in SCATTER_X_FIELDS:
        raise ValueError(f"Unsupported x axis '{x_field}'")
    if y_field not in SCATTER_Y_FIELDS:
        raise ValueError(f"Unsupported y axis '{y_field}'")

    required = ("id", "formula", "type", x_field, y_field)
    if view.empty or any(c not in view.columns for c in required):
        return []

    x_values = pd.to_numeric(view[x_field], errors="coerce")
    y_values = pd.to_numeric(view[y_field], errors="coerce")
    plottable = np.isfinite(x_values.to_numpy(dtype=float)) & np.isfinite(y_values.to_numpy(dtype=float))

    out: List[ScatterSeries] = []
    for category in CATEGORIES:
        mask = plottable & (view["type"] == category.value).to_numpy(dtype=bool)
        if not mask.any():
            continue
        subset = view.loc[mask]
        out.append(
            ScatterSeries(
                category=category,
                ids=subset["id"].tolist(),
                formulas=[f if isinstance(f, str) else "" for f in subset["formula"].tolist()],
                x=x_values.loc[mask].astype(float).tolist(),
                y=y_values.loc[mask].astype(float).tolist(),
            )
        )
    return out
