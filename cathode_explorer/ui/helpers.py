from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from cathode_explorer.core.filter_state import (
    ALL_TYPES,
    DEFAULT_ENERGY_RANGE,
    DEFAULT_VOLTAGE_RANGE,
    FilterSpec,
)
from cathode_explorer.core.filtered_view import compute_view
from cathode_explorer.core.record import CATEGORIES
from cathode_explorer.export.delimited import natural_text

TABLE_COLUMNS = (
    ("formula", "Formula"),
    ("type", "Type"),
    ("voltage", "Voltage (V)"),
    ("energy_gravimetric", "Energy (Wh/kg)"),
    ("conductivity", "Conductivity (mS/cm)"),
    ("cycle_life", "Cycle Life"),
)

# Display precision per numeric table column
_TABLE_DECIMALS = {
    "voltage": 2,
    "energy_gravimetric": 0,
    "conductivity": 3,
}


def type_options() -> List[dict]:
    options = [{"label": "All types", "value": ALL_TYPES}]
    options.extend({"label": c.value, "value": c.value} for c in CATEGORIES)
    return options


def build_spec_from_controls(
    search_text: Optional[str],
    type_value: Optional[str],
    voltage_range: Optional[Sequence[float]],
    energy_range: Optional[Sequence[float]],
) -> Dict[str, Any]:
    """
    Pure helper turning raw control values into a FilterSpec dict for the store.

    Empty / missing controls fall back to the defaults; FilterSpec.from_dict
    sanitises unknown types and reversed ranges.
    """
    spec = FilterSpec.from_dict(
        {
            "search_text": (search_text or "").strip(),
            "type": type_value or ALL_TYPES,
            "voltage_range": list(voltage_range) if voltage_range else list(DEFAULT_VOLTAGE_RANGE),
            "energy_range": list(energy_range) if energy_range else list(DEFAULT_ENERGY_RANGE),
        }
    )
    return spec.to_dict()


def current_view(ctx: Any, spec_data: Optional[Dict[str, Any]]) -> pd.DataFrame:
    """
    Filtered view for the app's record store and the stored filter spec.

    Until the store is READY (still loading, or failed) the view is empty and
    no filtering is attempted.
    """
    store = ctx.store
    if not store.is_ready:
        return store.frame.iloc[0:0]
    return compute_view(store, FilterSpec.from_dict(spec_data))


def _format_cell(column: str, value: Any) -> Any:
    decimals = _TABLE_DECIMALS.get(column)
    if decimals is not None and isinstance(value, (int, float)) and pd.notna(value):
        return f"{value:.{decimals}f}"
    return natural_text(value)


def table_rows(page_frame: pd.DataFrame) -> List[Dict[str, Any]]:
    """Rows for the record table; each row keeps its record id for the details modal."""
    rows: List[Dict[str, Any]] = []
    for record in page_frame.to_dict("records"):
        row = {"id": natural_text(record.get("id"))}
        for column, _ in TABLE_COLUMNS:
            row[column] = _format_cell(column, record.get(column))
        rows.append(row)
    return rows


def filter_summary(spec: FilterSpec, n_selected: int, n_total: int) -> str:
    parts = [f"Showing {n_selected} of {n_total} compounds"]
    if spec.search_text:
        parts.append(f"search '{spec.search_text}'")
    if spec.type != ALL_TYPES:
        parts.append(f"type {spec.type.value}")
    lo, hi = spec.voltage_range
    parts.append(f"voltage {lo:.1f}-{hi:.1f} V")
    lo, hi = spec.energy_range
    parts.append(f"energy {lo:.0f}-{hi:.0f} Wh/kg")
    return " · ".join(parts)
