from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

from cathode_explorer.core.record import Category

logger = logging.getLogger(__name__)

ALL_TYPES = "all"

DEFAULT_VOLTAGE_RANGE: Tuple[float, float] = (0.0, 5.0)
DEFAULT_ENERGY_RANGE: Tuple[float, float] = (0.0, 5000.0)

# Axes offered by the scatter plot
SCATTER_X_FIELDS: Tuple[str, ...] = (
    "voltage",
    "capacity",
    "conductivity",
    "stability",
    "volume_expansion",
    "bandgap",
)
SCATTER_Y_FIELDS: Tuple[str, ...] = (
    "energy_gravimetric",
    "energy_volumetric",
    "cycle_life",
    "rate_capability",
    "coulombic_efficiency",
)


def _as_range(value: Any, default: Tuple[float, float]) -> Tuple[float, float]:
    """Coerce a 2-sequence into an ordered (min, max) float pair."""
    try:
        lo, hi = value
        lo, hi = float(lo), float(hi)
    except (TypeError, ValueError):
        return default
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi


@dataclass(frozen=True)
class FilterSpec:
    """
    The current set of user-chosen inclusion predicates.

    Fields:

    - search_text: case-insensitive substring matched against formula / base_formula
    - type: a Category, or "all" to disable the category predicate
    - voltage_range: inclusive (min, max) on voltage
    - energy_range: inclusive (min, max) on energy_gravimetric

    Instances are immutable: every user interaction produces a new FilterSpec
    (see with_changes / reset).
    """

    search_text: str = ""
    type: Union[Category, str] = ALL_TYPES
    voltage_range: Tuple[float, float] = DEFAULT_VOLTAGE_RANGE
    energy_range: Tuple[float, float] = DEFAULT_ENERGY_RANGE

    @classmethod
    def default(cls) -> FilterSpec:
        return cls()

    def reset(self) -> FilterSpec:
        return FilterSpec.default()

    def with_changes(self, **changes: Any) -> FilterSpec:
        return replace(self, **changes)

    @property
    def is_default(self) -> bool:
        return self == FilterSpec.default()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "search_text": self.search_text,
            "type": self.type.value if isinstance(self.type, Category) else ALL_TYPES,
            "voltage_range": list(self.voltage_range),
            "energy_range": list(self.energy_range),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterSpec:
        if not data:
            return cls.default()

        raw_type = data.get("type", ALL_TYPES)
        spec_type: Union[Category, str] = ALL_TYPES
        if raw_type not in (None, ALL_TYPES):
            category = Category.parse(raw_type)
            if category is None:
                logger.warning(
                    "Unknown category in filter state; falling back to 'all'",
                    extra={"type": raw_type},
                )
            else:
                spec_type = category

        search_text = data.get("search_text") or ""

        return cls(
            search_text=str(search_text),
            type=spec_type,
            voltage_range=_as_range(data.get("voltage_range"), DEFAULT_VOLTAGE_RANGE),
            energy_range=_as_range(data.get("energy_range"), DEFAULT_ENERGY_RANGE),
        )


@dataclass(frozen=True)
class PlotOptions:
    """
    Display options for the plot views (not part of the selection).

    - x_axis / y_axis: scatter axes
    - histogram_bins: bin count used by the distribution view
    """

    x_axis: str = "voltage"
    y_axis: str = "energy_gravimetric"
    histogram_bins: int = 15

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> PlotOptions:
        data = data or {}
        x_axis = data.get("x_axis")
        y_axis = data.get("y_axis")
        return cls(
            x_axis=x_axis if x_axis in SCATTER_X_FIELDS else "voltage",
            y_axis=y_axis if y_axis in SCATTER_Y_FIELDS else "energy_gravimetric",
            histogram_bins=int(data.get("histogram_bins", 15)),
        )
