from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cathode_explorer.analysis.histogram import DEFAULT_BIN_COUNT
from cathode_explorer.analysis.pager import DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class ExplorerConfig:
    """
    Parsed explorer.json.

    data_path is already resolved (relative paths are taken from the config root).
    """

    data_path: Path
    ui_title: str = "Cathode Explorer"
    subtitle: str = "Interactive Compound Database"
    page_size: int = DEFAULT_PAGE_SIZE
    histogram_bins: int = DEFAULT_BIN_COUNT
