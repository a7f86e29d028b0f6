from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from cathode_explorer.analysis.statistics import field_mean, format_fixed, round_half_up
from cathode_explorer.core.record import CATEGORIES, Category


@dataclass(frozen=True)
class CategoryStats:
    category: Category
    avg_voltage: Optional[float]
    avg_energy: Optional[float]
    avg_conductivity: Optional[float]
    count: int

    def to_display_dict(self) -> dict:
        return {
            "type": self.category.value,
            "avg_voltage": format_fixed(self.avg_voltage, 2),
            "avg_energy": "n/a" if self.avg_energy is None else str(round_half_up(self.avg_energy)),
            "avg_conductivity": format_fixed(self.avg_conductivity, 2),
            "count": self.count,
        }


@dataclass(frozen=True)
class CategoryCount:
    category: Category
    count: int


def _category_subset(view: pd.DataFrame, category: Category) -> pd.DataFrame:
    if "type" not in view.columns:
        return view.iloc[0:0]
    return view.loc[view["type"] == category.value]


def compute_category_stats(
    view: pd.DataFrame,
    categories: Sequence[Category] = CATEGORIES,
) -> List[CategoryStats]:
    """
    Per-category means over the filtered view.

    One entry per category (in the given order) that has at least one record
    in the view; empty categories are omitted rather than reported with zero
    or NaN values. Means follow compute_stats semantics within each subset.
    """
    out: List[CategoryStats] = []
    for category in categories:
        subset = _category_subset(view, category)
        if subset.empty:
            continue
        out.append(
            CategoryStats(
                category=category,
                avg_voltage=field_mean(subset, "voltage"),
                avg_energy=field_mean(subset, "energy_gravimetric"),
                avg_conductivity=field_mean(subset, "conductivity"),
                count=len(subset),
            )
        )
    return out


def compute_type_distribution(
    view: pd.DataFrame,
    categories: Sequence[Category] = CATEGORIES,
) -> List[CategoryCount]:
    """Record count per category present in the view, in fixed category order."""
    if view.empty or "type" not in view.columns:
        return []
    counts = view["type"].value_counts()
    return [
        CategoryCount(category=c, count=int(counts[c.value]))
        for c in categories
        if c.value in counts.index
    ]
