from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import pandas as pd
import plotly.graph_objs as go

from .filter_state import PlotOptions

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all plot views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive the plot data from the filtered view
    - implement 'render_figure' - render the figure using Plotly

    A view is built around an already filtered record table and never sees
    the record store itself.
    """

    id: str = None
    label: str = None

    def __init__(self, records: pd.DataFrame):
        self.records = records

    @abstractmethod
    def compute_data(self, options: PlotOptions) -> Any:
        """
        Compute the plot data for the current display options
        :param options: the current {@link PlotOptions} (axes, bin count)
        :return: data: whatever render_figure needs
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, options: PlotOptions) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param options: the current {@link PlotOptions}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self, options: PlotOptions) -> Any:
        start = time.perf_counter()
        data = self.compute_data(options)
        logger.info(
            "compute_data_done",
            extra={
                "view_id": self.id,
                "n_records": len(self.records),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    def figure(self, options: PlotOptions) -> go.Figure:
        return self.render_figure(self.timed_compute(options), options)

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
