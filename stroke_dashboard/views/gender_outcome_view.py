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
from stroke_dashboard.core.schema import GENDER_COLUMN, STROKE_COLUMN

COUNT_COLUMN = "count"


def aggregate_gender_outcome(table: pd.DataFrame) -> pd.DataFrame:
    """
    Count rows per (gender, stroke) group.

    Only groups that actually occur are returned; there is no zero-filling.
    Groups come out sorted by gender then stroke.
    """
    if table.empty:
        return pd.DataFrame(
            {
                GENDER_COLUMN: pd.Series(dtype=object),
                STROKE_COLUMN: pd.Series(dtype="Int64"),
                COUNT_COLUMN: pd.Series(dtype="int64"),
            }
        )

    counts = (
        table.groupby([GENDER_COLUMN, STROKE_COLUMN], sort=True, dropna=True)
        .size()
        .reset_index(name=COUNT_COLUMN)
    )
    return counts


class GenderOutcomeBarView(BaseView):
    """
    Grouped bar chart: patients per gender, one bar per stroke outcome.
    """

    id = "gender_outcome_bar"
    label = "Stroke Outcome by Gender"

    def compute_data(self, table: pd.DataFrame) -> pd.DataFrame:
        counts = aggregate_gender_outcome(table)
        counts[OUTCOME_COLUMN] = self.with_outcome(counts)
        return counts

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No patients match the current filters")

        fig = px.bar(
            data,
            x=GENDER_COLUMN,
            y=COUNT_COLUMN,
            color=OUTCOME_COLUMN,
            barmode="group",
            category_orders={OUTCOME_COLUMN: OUTCOME_ORDER},
            color_discrete_map=OUTCOME_COLORS,
        )
        fig.update_layout(
            title=self.label,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title="Gender",
            yaxis_title="Patients",
            legend_title="Outcome",
        )
        return fig
