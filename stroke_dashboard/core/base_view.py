from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

import pandas as pd
import plotly.graph_objs as go

from stroke_dashboard.core.schema import STROKE_COLUMN

logger = logging.getLogger(__name__)

OUTCOME_COLUMN = "outcome"
NO_STROKE_LABEL = "No stroke"
STROKE_LABEL = "Stroke"
OUTCOME_ORDER = [NO_STROKE_LABEL, STROKE_LABEL]
OUTCOME_COLORS = {NO_STROKE_LABEL: "#3b82f6", STROKE_LABEL: "#ef4444"}


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive the chart's data from the filtered table
    - implement 'render_figure' - render the figure using Plotly

    Views never filter the dataset themselves. They receive the one filtered
    table the pipeline computed for the current FilterState, so every chart
    on screen reflects the same rows.
    """

    id: str = None
    label: str = None

    @abstractmethod
    def compute_data(self, table: pd.DataFrame) -> pd.DataFrame:
        """
        Derive this view's data from the filtered table. Must be pure.
        :param table: the filtered patient table
        :return: data: a dataframe ready for {@link render_figure()}
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self, table: pd.DataFrame) -> pd.DataFrame:
        """
        compute_data() with a debug timing log line.
        """
        start = time.perf_counter()
        data = self.compute_data(table)
        logger.debug(
            "view_compute",
            extra={
                "view_id": self.id,
                "n_rows_in": len(table),
                "n_rows_out": len(data),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    def build(self, table: pd.DataFrame) -> go.Figure:
        """Compute and render in one step."""
        return self.render_figure(self.timed_compute(table))

    @staticmethod
    def with_outcome(table: pd.DataFrame) -> pd.Series:
        """
        Map the 0/1 stroke column to readable outcome labels. Unknown
        outcomes (missing stroke) stay missing.
        """
        stroke = pd.to_numeric(table[STROKE_COLUMN], errors="coerce")
        return stroke.map({0: NO_STROKE_LABEL, 1: STROKE_LABEL})

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
