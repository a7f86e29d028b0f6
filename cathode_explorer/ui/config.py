from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from cathode_explorer.config.model import ExplorerConfig
from cathode_explorer.core.record_store import RecordStore
from cathode_explorer.core.view_registry import ViewRegistry
from cathode_explorer.services.export_service import ExportService


@dataclass
class AppConfig:
    """
    Shared, read-only app context: config, the session record store, the view
    registry and services. Passed into layout + callback registration instead
    of module-level globals. Per-user explorer state lives in dcc.Store components.
    """
    config_root: Path
    explorer_config: ExplorerConfig
    store: RecordStore = field(default_factory=RecordStore.loading)

    registry: Optional[ViewRegistry] = None
    export_service: Optional[ExportService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")
