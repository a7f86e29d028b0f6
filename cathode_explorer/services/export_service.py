from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from cathode_explorer.core.exceptions import EmptyExportError
from cathode_explorer.export.delimited import to_delimited_text

logger = logging.getLogger(__name__)

EXPORT_MEDIA_TYPE = "text/csv"


def export_filename(count: int) -> str:
    return f"filtered_compounds_{count}.csv"


@dataclass(frozen=True)
class ExportPayload:
    filename: str
    content: str
    media_type: str = EXPORT_MEDIA_TYPE


class ExportService:
    """
    Packages the filtered view as a downloadable CSV file.
    Stateless: serialises whatever view it is handed.
    """

    def can_export(self, view: pd.DataFrame) -> bool:
        return view is not None and not view.empty

    def build_export(self, view: pd.DataFrame) -> ExportPayload:
        """
        Raises:
            EmptyExportError: if the view has no records
        """
        if not self.can_export(view):
            raise EmptyExportError("Nothing to export: the filtered view is empty")

        payload = ExportPayload(
            filename=export_filename(len(view)),
            content=to_delimited_text(view),
        )
        logger.info(
            "export_built",
            extra={"filename": payload.filename, "n_records": len(view)},
        )
        return payload
