from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class Category(Enum):
    """Closed set of material classes a compound record can belong to."""

    SULFIDE = "Sulfide"
    OXIDE = "Oxide"
    PHOSPHATE = "Phosphate"
    SELENIDE = "Selenide"
    NITRIDE = "Nitride"
    FLUORIDE = "Fluoride"
    CHLORIDE = "Chloride"
    SILICATE = "Silicate"

    @classmethod
    def parse(cls, value: Any) -> Optional[Category]:
        """
        Return the Category for a raw label (or Category), or None if the label
        is not part of the closed set. Matching is exact on the canonical label.
        """
        if isinstance(value, Category):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Fixed display/aggregation order
CATEGORIES: Tuple[Category, ...] = tuple(Category)

# Fixed record field order (export header, table columns, store columns)
RECORD_FIELDS: Tuple[str, ...] = (
    "id",
    "formula",
    "base_formula",
    "type",
    "space_group",
    "crystal_system",
    "li_content",
    "ti_content",
    "voltage",
    "capacity",
    "energy_gravimetric",
    "energy_volumetric",
    "conductivity",
    "overpotential",
    "cycle_life",
    "stability",
    "volume_expansion",
    "rate_capability",
    "coulombic_efficiency",
    "bandgap",
    "density",
    "elastic_modulus",
)

TEXT_FIELDS: Tuple[str, ...] = ("formula", "base_formula", "space_group", "crystal_system")

NUMERIC_FIELDS: Tuple[str, ...] = (
    "li_content",
    "ti_content",
    "voltage",
    "capacity",
    "energy_gravimetric",
    "energy_volumetric",
    "conductivity",
    "overpotential",
    "cycle_life",
    "stability",
    "volume_expansion",
    "rate_capability",
    "coulombic_efficiency",
    "bandgap",
    "density",
    "elastic_modulus",
)


def is_finite_number(value: Any) -> bool:
    """True for real, finite numbers (bools excluded)."""
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


@dataclass(frozen=True)
class CompoundRecord:
    """
    One candidate cathode material with its full attribute set.

    Numeric attributes are None when the source record is missing them or
    carries a non-finite / non-numeric value.
    """

    id: Any
    formula: Optional[str] = None
    base_formula: Optional[str] = None
    type: Optional[Category] = None
    space_group: Optional[str] = None
    crystal_system: Optional[str] = None
    li_content: Optional[float] = None
    ti_content: Optional[float] = None
    voltage: Optional[float] = None
    capacity: Optional[float] = None
    energy_gravimetric: Optional[float] = None
    energy_volumetric: Optional[float] = None
    conductivity: Optional[float] = None
    overpotential: Optional[float] = None
    cycle_life: Optional[float] = None
    stability: Optional[float] = None
    volume_expansion: Optional[float] = None
    rate_capability: Optional[float] = None
    coulombic_efficiency: Optional[float] = None
    bandgap: Optional[float] = None
    density: Optional[float] = None
    elastic_modulus: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CompoundRecord:
        """
        Build a record from a plain mapping (JSON object or a DataFrame row).
        Unknown keys are ignored.
        """
        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if f.name == "type":
                values[f.name] = Category.parse(raw)
            elif f.name in NUMERIC_FIELDS:
                values[f.name] = float(raw) if is_finite_number(raw) else None
            elif f.name in TEXT_FIELDS:
                values[f.name] = raw if isinstance(raw, str) else None
            else:
                values[f.name] = raw
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for name in RECORD_FIELDS:
            value = getattr(self, name)
            out[name] = value.value if isinstance(value, Category) else value
        return out
