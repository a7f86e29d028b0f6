from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from cathode_explorer.core.record import Category, NUMERIC_FIELDS
from cathode_explorer.validation.errors import ValidationError, ValidationIssue

# Fields the filters and aggregates rely on
REQUIRED_FIELDS = ("id", "formula", "base_formula", "type", "voltage", "energy_gravimetric")


def validate_records(raw: pd.DataFrame) -> None:
    """
    Check a raw (not yet normalised) record table.

    Raises:
        ValidationError: listing every issue found
    """
    issues: list[ValidationIssue] = []

    for name in REQUIRED_FIELDS:
        if name not in raw.columns:
            issues.append(ValidationIssue("RECORD_MISSING_FIELD", f"No record carries field '{name}'.", field=name))

    if "id" in raw.columns:
        dupes = raw["id"][raw["id"].duplicated()].astype(str).unique()
        if len(dupes):
            issues.append(
                ValidationIssue("RECORD_DUPLICATE_ID", f"Duplicate ids: {', '.join(sorted(dupes)[:10])}.", field="id")
            )

    if "type" in raw.columns:
        unknown = sorted({str(v) for v in raw["type"] if Category.parse(v) is None})
        if unknown:
            issues.append(
                ValidationIssue("RECORD_UNKNOWN_TYPE", f"Unknown material types: {', '.join(unknown)}.", field="type")
            )

    for name in NUMERIC_FIELDS:
        if name not in raw.columns:
            continue
        values = pd.to_numeric(raw[name], errors="coerce").to_numpy(dtype=float)
        n_invalid = int((~np.isfinite(values)).sum())
        if n_invalid:
            issues.append(
                ValidationIssue(
                    "RECORD_INVALID_NUMBER",
                    f"{n_invalid} record(s) have a missing or non-finite '{name}'.",
                    field=name,
                )
            )

    if issues:
        raise ValidationError(issues)


def warn_on_invalid_records(raw: pd.DataFrame, logger: logging.Logger, source: str | None = None) -> bool:
    """
    Validate records and log a warning for each problem.

    This is warn-only: affected records are simply excluded from the
    computations that need the bad field. Returns True if the table is clean.
    """
    try:
        validate_records(raw)
    except ValidationError as e:
        logger.warning(
            "Record validation failed for %r: %s",
            source,
            "; ".join(f"{issue.code}: {issue.message}" for issue in e.issues),
        )
        return False
    return True
