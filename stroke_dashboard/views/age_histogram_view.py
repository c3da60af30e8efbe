from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from stroke_dashboard.core.base_view import (
    BaseView,
    OUTCOME_COLORS,
    OUTCOME_COLUMN,
    OUTCOME_ORDER,
)
from stroke_dashboard.core.schema import AGE_COLUMN, ID_COLUMN


class AgeOutcomeHistogram(BaseView):
    """
    Age distribution, split by stroke outcome as two overlaid series.

    Fixed 5-year bins starting at 0 so the same table always gives the same bars.
    """

    id = "age_histogram"
    label = "Age Distribution by Outcome"

    BIN_SIZE = 5

    def compute_data(self, table: pd.DataFrame) -> pd.DataFrame:
        df = pd.DataFrame(
            {
                ID_COLUMN: table[ID_COLUMN],
                AGE_COLUMN: table[AGE_COLUMN],
                OUTCOME_COLUMN: self.with_outcome(table),
            },
            index=table.index,
        )
        return df.dropna(subset=[AGE_COLUMN, OUTCOME_COLUMN])

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No patients match the current filters")

        fig = px.histogram(
            data,
            x=AGE_COLUMN,
            color=OUTCOME_COLUMN,
            barmode="overlay",
            opacity=0.75,
            category_orders={OUTCOME_COLUMN: OUTCOME_ORDER},
            color_discrete_map=OUTCOME_COLORS,
        )
        fig.update_traces(xbins=dict(start=0, size=self.BIN_SIZE))
        fig.update_layout(
            title=self.label,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title="Age (years)",
            yaxis_title="Patients",
            legend_title="Outcome",
        )
        return fig
