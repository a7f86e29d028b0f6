from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from cathode_explorer.config.loader import load_explorer_config
from cathode_explorer.core.record_loader import load_record_store
from cathode_explorer.core.view_registry import ViewRegistry
from cathode_explorer.services.export_service import ExportService
from cathode_explorer.ui.layout.build_layout import build_layout
from cathode_explorer.ui.callbacks.callbacks_filters import register_filter_callbacks
from cathode_explorer.ui.callbacks.callbacks_render import register_render_callbacks
from cathode_explorer.ui.callbacks.callbacks_table import register_table_callbacks
from cathode_explorer.ui.callbacks.callbacks_detail import register_detail_callbacks
from cathode_explorer.ui.callbacks.callbacks_export import register_export_callbacks

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from cathode_explorer.views import (
        DistributionView,
        ScatterView,
        TypeComparisonView,
        TypeDistributionView,
    )

    registry = ViewRegistry()
    registry.register(ScatterView)
    registry.register(DistributionView)
    registry.register(TypeComparisonView)
    registry.register(TypeDistributionView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    explorer_config = load_explorer_config(config_root)

    # 2) One-time dataset load; a failure leaves an explicit FAILED store
    store = load_record_store(explorer_config.data_path)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        explorer_config=explorer_config,
        store=store,
        registry=build_view_registry(),
        export_service=ExportService(),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = explorer_config.ui_title
    app.layout = build_layout(ctx)

    if not store.is_ready:
        # Layout shows the load error only; nothing to wire up
        logger.error(
            "Record store not ready; explorer callbacks disabled",
            extra={"status": store.status.value, "error": store.error},
        )
        return app

    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_table_callbacks(app, ctx)
    register_detail_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    return app
