from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
import pandas as pd


def field_values(view: pd.DataFrame, field: str) -> np.ndarray:
    """
    Finite values of one numeric field over the view.

    Records missing the field (absent column, NaN, non-numeric, non-finite)
    are excluded from the result.
    """
    if field not in view.columns or view.empty:
        return np.empty(0, dtype=float)
    values = pd.to_numeric(view[field], errors="coerce").to_numpy(dtype=float)
    return values[np.isfinite(values)]


def field_mean(view: pd.DataFrame, field: str) -> Optional[float]:
    """Plain arithmetic mean (no weighting, no outlier removal); None if no values."""
    values = field_values(view, field)
    if values.size == 0:
        return None
    return float(values.sum() / values.size)


def field_max(view: pd.DataFrame, field: str) -> Optional[float]:
    values = field_values(view, field)
    if values.size == 0:
        return None
    return float(values.max())


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_fixed(value: Optional[float], decimals: int) -> str:
    if value is None:
        return "n/a"
    return f"{value:.{decimals}f}"


@dataclass(frozen=True)
class Stats:
    """
    Summary scalars over a non-empty filtered view.

    Values are kept in full precision; the display_* helpers apply the
    display rounding (2 decimals for voltage and conductivity, integer for energy).
    A mean is None when no record of the view carries the field.
    """

    count: int
    avg_voltage: Optional[float]
    avg_energy: Optional[float]
    max_cycles: Optional[float]
    avg_conductivity: Optional[float]

    @property
    def display_avg_voltage(self) -> str:
        return format_fixed(self.avg_voltage, 2)

    @property
    def display_avg_energy(self) -> str:
        if self.avg_energy is None:
            return "n/a"
        return str(round_half_up(self.avg_energy))

    @property
    def display_max_cycles(self) -> str:
        if self.max_cycles is None:
            return "n/a"
        return f"{round_half_up(self.max_cycles / 1000)}k"

    @property
    def display_avg_conductivity(self) -> str:
        return format_fixed(self.avg_conductivity, 2)

    def to_display_dict(self) -> Dict[str, str]:
        return {
            "count": str(self.count),
            "avg_voltage": self.display_avg_voltage,
            "avg_energy": self.display_avg_energy,
            "max_cycles": self.display_max_cycles,
            "avg_conductivity": self.display_avg_conductivity,
        }


def compute_stats(view: pd.DataFrame) -> Optional[Stats]:
    """
    Compute summary statistics over the filtered view.

    Returns None for an empty view; callers must treat None as the empty state.
    The conductivity mean is linear even though the field spans many orders
    of magnitude.
    """
    if view is None or view.empty:
        return None

    max_cycles = field_max(view, "cycle_life")
    return Stats(
        count=len(view),
        avg_voltage=field_mean(view, "voltage"),
        avg_energy=field_mean(view, "energy_gravimetric"),
        max_cycles=max_cycles,
        avg_conductivity=field_mean(view, "conductivity"),
    )
