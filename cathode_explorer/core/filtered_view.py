from __future__ import annotations

import logging
from typing import Any, Optional, Union

import pandas as pd

from cathode_explorer.core.filter_state import FilterSpec
from cathode_explorer.core.predicate import filter_mask
from cathode_explorer.core.record import CompoundRecord
from cathode_explorer.core.record_store import RecordStore

logger = logging.getLogger(__name__)


def compute_view(records: Union[RecordStore, pd.DataFrame], spec: FilterSpec) -> pd.DataFrame:
    """
    Return the records passing the filter specification.

    The filtered view is the single source of truth for every derived view
    (stats, histograms, category comparison, pages, export). It is recomputed
    in full on every call: no caching, no mutation of the input. Row order and
    index labels are those of the record store. An empty result is valid.
    """
    frame = records.frame if isinstance(records, RecordStore) else records
    mask = filter_mask(frame, spec)
    view = frame.loc[mask]

    logger.debug(
        "filtered_view_computed",
        extra={"n_records": len(frame), "n_selected": int(mask.sum())},
    )
    return view


def find_record(view: pd.DataFrame, record_id: Any) -> Optional[CompoundRecord]:
    """
    Look up one record of the filtered view by id.

    Ids are compared by their text form, so ids round-tripped through the
    browser (where numbers may come back as strings) still resolve.
    Returns None when the id is not part of the view.
    """
    if record_id is None or view.empty or "id" not in view.columns:
        return None

    hits = view.loc[view["id"].astype(str) == str(record_id)]
    if hits.empty:
        return None
    return CompoundRecord.from_mapping(hits.iloc[0].to_dict())
