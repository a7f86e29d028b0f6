from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from cathode_explorer.core.exceptions import DatasetLoadError
from cathode_explorer.core.record_store import RecordStore
from cathode_explorer.validation.record_validation import warn_on_invalid_records

logger = logging.getLogger(__name__)


def read_records(path: Path) -> List[Dict[str, Any]]:
    """
    Read the compound dataset: a JSON array of record objects.

    Raises:
        DatasetLoadError: if the file is missing, unreadable, not JSON, or not
            a list of objects
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(f"Compound dataset not found at {path}.")

    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Compound dataset at {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise DatasetLoadError(f"Could not read compound dataset at {path}: {e}") from e

    if not isinstance(raw, list):
        raise DatasetLoadError(
            f"Compound dataset at {path} must be a JSON array, got {type(raw).__name__}."
        )

    bad = [i for i, item in enumerate(raw) if not isinstance(item, dict)]
    if bad:
        raise DatasetLoadError(
            f"Compound dataset at {path} has {len(bad)} non-object entries (first at index {bad[0]})."
        )

    return raw


def load_record_store(path: Path) -> RecordStore:
    """
    One-time dataset load for the session.

    Always returns a store: READY with every record on success, or FAILED
    (empty, carrying the error message) when the dataset could not be read.
    Record-level problems are logged, never fatal.
    """
    path = Path(path)
    logger.info("Loading compound dataset", extra={"path": str(path)})

    try:
        rows = read_records(path)
    except DatasetLoadError as e:
        logger.error("Compound dataset load failed", extra={"path": str(path), "error": str(e)})
        return RecordStore.failed(str(e), source=str(path))

    raw = pd.DataFrame.from_records(rows)
    warn_on_invalid_records(raw, logger, source=str(path))

    store = RecordStore.from_frame(raw, source=str(path))
    logger.info(
        "Compound dataset loaded",
        extra={"path": str(path), "n_records": len(store)},
    )
    return store
