"""
Core domain layer: compound records, the record store, the filter
specification and the filtered view, plus the plot view base class and
the view registry
"""

from .record import Category, CompoundRecord
from .record_store import RecordStore
from .filter_state import FilterSpec
from .predicate import matches
from .filtered_view import compute_view

__all__ = ["Category", "CompoundRecord", "RecordStore", "FilterSpec", "matches", "compute_view"]
