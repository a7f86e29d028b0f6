from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd

from cathode_explorer.core.record import (
    Category,
    CompoundRecord,
    NUMERIC_FIELDS,
    RECORD_FIELDS,
    TEXT_FIELDS,
)

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def build_record_frame(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Normalise a raw record table into the store layout.

    - Known fields come first, in RECORD_FIELDS order; unknown columns follow
      in their original order. Missing known fields are added as empty columns.
    - Numeric fields are coerced to float; non-numeric and non-finite values
      become NaN (i.e. "missing" for every downstream computation).
    - `type` is normalised to the canonical Category label, unknown labels to None.
    - Text fields keep strings only.
    """
    df = raw.copy()

    for name in RECORD_FIELDS:
        if name not in df.columns:
            df[name] = np.nan if name in NUMERIC_FIELDS else None

    for name in NUMERIC_FIELDS:
        col = pd.to_numeric(df[name], errors="coerce").astype(float)
        df[name] = col.replace([np.inf, -np.inf], np.nan)

    df["type"] = df["type"].map(
        lambda v: c.value if (c := Category.parse(v)) is not None else None
    ).astype(object)

    for name in TEXT_FIELDS:
        df[name] = df[name].map(lambda v: v if isinstance(v, str) else None).astype(object)

    extra = [c for c in df.columns if c not in RECORD_FIELDS]
    df = df[list(RECORD_FIELDS) + extra]
    return df.reset_index(drop=True)


class RecordStore:
    """
    Immutable, session-wide table of compound records.

    A store is in exactly one of three states:
    - LOADING: no records yet, nothing may be computed from it
    - READY: the full dataset has been loaded
    - FAILED: the load failed; the store is empty and carries the error message

    A store is never partially populated. The underlying frame must be treated
    as read-only; all derived computations go through compute_view().
    """

    def __init__(
        self,
        frame: pd.DataFrame,
        status: LoadStatus = LoadStatus.READY,
        error: Optional[str] = None,
        source: Optional[str] = None,
    ) -> None:
        self._frame = frame
        self._status = status
        self._error = error
        self._source = source

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------
    @classmethod
    def loading(cls) -> RecordStore:
        return cls(build_record_frame(pd.DataFrame()), status=LoadStatus.LOADING)

    @classmethod
    def failed(cls, error: str, source: Optional[str] = None) -> RecordStore:
        return cls(
            build_record_frame(pd.DataFrame()),
            status=LoadStatus.FAILED,
            error=error,
            source=source,
        )

    @classmethod
    def from_frame(cls, raw: pd.DataFrame, source: Optional[str] = None) -> RecordStore:
        return cls(build_record_frame(raw), status=LoadStatus.READY, source=source)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        source: Optional[str] = None,
    ) -> RecordStore:
        rows = [dict(r) for r in records]
        return cls.from_frame(pd.DataFrame.from_records(rows), source=source)

    # -------------------------------------------------------------------------
    # Properties & getters
    # -------------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def is_ready(self) -> bool:
        return self._status is LoadStatus.READY

    @property
    def columns(self) -> List[str]:
        return [str(c) for c in self._frame.columns]

    def records(self) -> List[CompoundRecord]:
        return [CompoundRecord.from_mapping(row) for row in self._frame.to_dict("records")]

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return f"RecordStore(status={self._status.value}, n_records={len(self)})"
