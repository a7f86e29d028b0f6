from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from cathode_explorer.analysis.histogram import DEFAULT_BIN_COUNT
from cathode_explorer.analysis.pager import DEFAULT_PAGE_SIZE
from cathode_explorer.config.model import ExplorerConfig
from cathode_explorer.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "explorer.json"
DEFAULT_DATA_PATH = Path("../data/compounds_data.json")
DATA_PATH_ENV = "CATHODE_EXPLORER_DATA_PATH"


def _positive_int(raw: Dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def _resolve(root: Path, path: Path) -> Path:
    return path if path.is_absolute() else (root / path).resolve()


def load_explorer_config(root: Path) -> ExplorerConfig:
    """
    Load explorer.json from the config root.

    A missing file means "all defaults". The data path can be overridden with
    CATHODE_EXPLORER_DATA_PATH (absolute, or relative to the working directory).

    Raises:
        ConfigError: malformed JSON or invalid values
    """
    root = Path(root)
    config_path = root / CONFIG_FILENAME

    logger.info("Loading explorer config", extra={"config_root": str(root)})

    raw: Dict[str, Any] = {}
    if config_path.is_file():
        try:
            with config_path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{config_path} must contain a JSON object")
    else:
        logger.warning(f"No {CONFIG_FILENAME} found in {root}; using defaults")

    env_path = os.getenv(DATA_PATH_ENV)
    if env_path:
        data_path = Path(env_path).resolve()
    else:
        data_path = _resolve(root, Path(raw.get("data_path") or DEFAULT_DATA_PATH))

    cfg = ExplorerConfig(
        data_path=data_path,
        ui_title=str(raw.get("ui_title", "Cathode Explorer")),
        subtitle=str(raw.get("subtitle", "Interactive Compound Database")),
        page_size=_positive_int(raw, "page_size", DEFAULT_PAGE_SIZE),
        histogram_bins=_positive_int(raw, "histogram_bins", DEFAULT_BIN_COUNT),
    )

    logger.info(
        "Explorer config loaded",
        extra={"data_path": str(cfg.data_path), "page_size": cfg.page_size},
    )
    return cfg
