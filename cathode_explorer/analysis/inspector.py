from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from cathode_explorer.core.record import CompoundRecord


@dataclass(frozen=True)
class DetailSection:
    title: str
    rows: List[Tuple[str, str]]


def _fixed(decimals: int, suffix: str = "", scale: float = 1.0) -> Callable[[Optional[float]], str]:
    def fmt(value: Optional[float]) -> str:
        if value is None:
            return "n/a"
        return f"{value * scale:.{decimals}f}{suffix}"
    return fmt


def _text(value: Optional[str]) -> str:
    return value if value else "n/a"


def _whole(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:,.0f}"


# (section title, [(label, attribute, formatter)])
_SECTIONS = (
    (
        "Composition & Structure",
        [
            ("Formula", "formula", _text),
            ("Base Formula", "base_formula", _text),
            ("Space Group", "space_group", _text),
            ("Crystal System", "crystal_system", _text),
            ("Li Content", "li_content", _fixed(2)),
            ("Ti Content", "ti_content", _fixed(1, "%", scale=100.0)),
            ("Volume Expansion", "volume_expansion", _fixed(2, "%")),
            ("Density", "density", _fixed(2, " g/cm³")),
            ("Bandgap", "bandgap", _fixed(3, " eV")),
            ("Elastic Modulus", "elastic_modulus", _fixed(1, " GPa")),
        ],
    ),
    (
        "Electrochemical Properties",
        [
            ("Voltage", "voltage", _fixed(2, " V")),
            ("Capacity", "capacity", _fixed(1, " mAh/g")),
            ("Energy (Grav.)", "energy_gravimetric", _fixed(0, " Wh/kg")),
            ("Energy (Vol.)", "energy_volumetric", _fixed(0, " Wh/L")),
            ("Conductivity", "conductivity", _fixed(3, " mS/cm")),
            ("Overpotential", "overpotential", _fixed(3, " V")),
        ],
    ),
    (
        "Performance Metrics",
        [
            ("Cycle Life", "cycle_life", _whole),
            ("Rate Capability", "rate_capability", _fixed(1, "%")),
            ("Coulombic Eff.", "coulombic_efficiency", _fixed(2, "%")),
            ("Stability", "stability", _fixed(3)),
        ],
    ),
)


def record_sections(record: CompoundRecord) -> List[DetailSection]:
    """Group a record's attributes into titled sections of (label, formatted value)."""
    return [
        DetailSection(
            title=title,
            rows=[(label, fmt(getattr(record, attr))) for label, attr, fmt in rows],
        )
        for title, rows in _SECTIONS
    ]


def record_title(record: CompoundRecord) -> str:
    category = record.type.value if record.type is not None else "Unknown type"
    return f"{record.formula or record.id} ({category})"
