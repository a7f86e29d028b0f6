from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from cathode_explorer.analysis.statistics import field_values

DEFAULT_BIN_COUNT = 15


@dataclass(frozen=True)
class HistogramBin:
    range_label: str
    count: int


@dataclass(frozen=True)
class HistogramSpec:
    """
    Fixed binning configuration for one numeric field.

    The domain and bin count are configuration, not derived from the data,
    so histograms of different views with the same spec are comparable.
    """

    field: str
    label: str
    domain_min: float
    domain_max: float
    bin_count: int = DEFAULT_BIN_COUNT
    decimals: Optional[int] = None

    def with_bins(self, bin_count: int) -> HistogramSpec:
        return HistogramSpec(
            field=self.field,
            label=self.label,
            domain_min=self.domain_min,
            domain_max=self.domain_max,
            bin_count=bin_count,
            decimals=self.decimals,
        )


VOLTAGE_HISTOGRAM = HistogramSpec("voltage", "Voltage (V)", 0.0, 5.0, decimals=1)
ENERGY_HISTOGRAM = HistogramSpec("energy_gravimetric", "Energy Density (Wh/kg)", 0.0, 5000.0, decimals=0)

DEFAULT_HISTOGRAMS: Sequence[HistogramSpec] = (VOLTAGE_HISTOGRAM, ENERGY_HISTOGRAM)


def _label_decimals(span: float) -> int:
    # 1 decimal for small domains like voltage [0, 5], whole numbers for energy-like ones
    return 1 if span <= 10 else 0


def bin_indices(values: np.ndarray, domain_min: float, domain_max: float, bin_count: int) -> np.ndarray:
    """
    Bin index per value: floor((v - min) / (max - min) * bin_count), clamped to
    [0, bin_count - 1]. Values at or above domain_max land in the last bin,
    values below domain_min in the first.
    """
    span = domain_max - domain_min
    idx = np.floor((values - domain_min) / span * bin_count)
    return np.clip(idx, 0, bin_count - 1).astype(int)


def compute_histogram(
    view: pd.DataFrame,
    field: str,
    domain_min: float,
    domain_max: float,
    bin_count: int = DEFAULT_BIN_COUNT,
    decimals: Optional[int] = None,
) -> List[HistogramBin]:
    """
    Fixed-bin frequency distribution of one numeric field over the view.

    Always returns exactly bin_count bins; labels are the lower bin edges.
    Records missing the field are not counted. An empty view yields all-zero
    counts.

    Raises:
        ValueError: if bin_count < 1 or domain_max <= domain_min
    """
    if bin_count < 1:
        raise ValueError(f"bin_count must be >= 1, got {bin_count}")
    if domain_max <= domain_min:
        raise ValueError(f"Empty histogram domain [{domain_min}, {domain_max}]")

    span = domain_max - domain_min
    if decimals is None:
        decimals = _label_decimals(span)

    values = field_values(view, field)
    if values.size:
        counts = np.bincount(
            bin_indices(values, domain_min, domain_max, bin_count),
            minlength=bin_count,
        )
    else:
        counts = np.zeros(bin_count, dtype=int)

    return [
        HistogramBin(
            range_label=f"{domain_min + i * span / bin_count:.{decimals}f}",
            count=int(counts[i]),
        )
        for i in range(bin_count)
    ]


def histogram_for_spec(view: pd.DataFrame, spec: HistogramSpec) -> List[HistogramBin]:
    return compute_histogram(
        view,
        spec.field,
        spec.domain_min,
        spec.domain_max,
        spec.bin_count,
        decimals=spec.decimals,
    )


def compute_distributions(
    view: pd.DataFrame,
    specs: Sequence[HistogramSpec] = DEFAULT_HISTOGRAMS,
) -> Dict[str, List[HistogramBin]]:
    """Histograms for several fields, each computed independently, keyed by field."""
    return {spec.field: histogram_for_spec(view, spec) for spec in specs}
