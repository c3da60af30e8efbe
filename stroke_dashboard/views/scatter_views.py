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
from stroke_dashboard.core.schema import AGE_COLUMN, BMI_COLUMN, GLUCOSE_COLUMN, ID_COLUMN


class _OutcomeScatterView(BaseView):
    """
    Age vs one numeric measurement, coloured by stroke outcome.

    Rows missing the measurement (or age) are dropped from this chart only;
    they still count everywhere else.
    """

    y_column: str = None
    y_title: str = None

    def compute_data(self, table: pd.DataFrame) -> pd.DataFrame:
        df = pd.DataFrame(
            {
                ID_COLUMN: table[ID_COLUMN],
                AGE_COLUMN: table[AGE_COLUMN],
                self.y_column: table[self.y_column],
                OUTCOME_COLUMN: self.with_outcome(table),
            },
            index=table.index,
        )
        return df.dropna(subset=[AGE_COLUMN, self.y_column, OUTCOME_COLUMN])

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure(f"No {self.y_title.lower()} values for the current filters")

        fig = px.scatter(
            data,
            x=AGE_COLUMN,
            y=self.y_column,
            color=OUTCOME_COLUMN,
            category_orders={OUTCOME_COLUMN: OUTCOME_ORDER},
            color_discrete_map=OUTCOME_COLORS,
            hover_data={ID_COLUMN: True},
        )
        fig.update_traces(marker=dict(size=5, opacity=0.7))
        fig.update_layout(
            title=self.label,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title="Age (years)",
            yaxis_title=self.y_title,
            legend_title="Outcome",
        )
        return fig


class GlucoseScatterView(_OutcomeScatterView):
    id = "age_glucose_scatter"
    label = "Age vs Average Glucose Level"
    y_column = GLUCOSE_COLUMN
    y_title = "Average glucose level (mg/dL)"


class BmiScatterView(_OutcomeScatterView):
    id = "age_bmi_scatter"
    label = "Age vs BMI"
    y_column = BMI_COLUMN
    y_title = "BMI"
