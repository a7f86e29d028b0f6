"""
Derived views over the filtered view: summary statistics, histograms,
per-category comparison, scatter series, paging and record inspection.

Every function here is pure and consumes only a filtered view.
"""

from .statistics import Stats, compute_stats
from .histogram import HistogramBin, compute_histogram
from .category_stats import CategoryStats, compute_category_stats
from .pager import page, total_pages

__all__ = [
    "Stats",
    "compute_stats",
    "HistogramBin",
    "compute_histogram",
    "CategoryStats",
    "compute_category_stats",
    "page",
    "total_pages",
]
