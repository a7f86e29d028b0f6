from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        FILTER_SPEC = "filter-spec"
        PAGE_INDEX = "page-index"
        SELECTED_RECORD = "selected-record"

    class Control:
        # Filters
        SEARCH_INPUT = "search-input"
        TYPE_SELECT = "type-select"
        VOLTAGE_RANGE = "voltage-range"
        ENERGY_RANGE = "energy-range"
        RESET_BTN = "reset-filters-btn"
        FILTER_SUMMARY = "filter-summary"

        # Export
        EXPORT_BTN = "export-btn"
        DOWNLOAD_EXPORT = "download-export"

        # Stats header
        STATS_CARDS = "stats-cards"
        SELECTION_COUNT = "selection-count"

        # Plots
        PLOT_TABS = "plot-tabs"
        X_AXIS_SELECT = "x-axis-select"
        Y_AXIS_SELECT = "y-axis-select"
        SCATTER_GRAPH = "scatter-graph"
        DISTRIBUTION_GRAPH = "distribution-graph"
        COMPARISON_GRAPH = "comparison-graph"
        TYPE_DISTRIBUTION_GRAPH = "type-distribution-graph"

        # Table + pager
        RECORD_TABLE = "record-table"
        PAGE_PREV_BTN = "page-prev-btn"
        PAGE_NEXT_BTN = "page-next-btn"
        PAGE_LABEL = "page-label"

        # Detail modal
        DETAIL_MODAL = "detail-modal"
        DETAIL_TITLE = "detail-title"
        DETAIL_BODY = "detail-body"
        DETAIL_CLOSE_BTN = "detail-close-btn"

        # Load status
        STATUS_BANNER = "status-banner"
