from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from stroke_dashboard.core.base_view import BaseView
from stroke_dashboard.ui.helpers import metric_card
from stroke_dashboard.ui.ids import IDs
from stroke_dashboard.ui.layout.build_plot_panel import build_plot_panel


def build_overview_panel(views: List[BaseView]) -> dbc.Container:
    """
    Overview page: summary metric cards plus the overview charts.
    """
    cards = dbc.Row(
        [
            dbc.Col(metric_card("Patients", IDs.Control.METRIC_TOTAL, "Rows matching the filters"), md=3),
            dbc.Col(metric_card("Avg glucose", IDs.Control.METRIC_GLUCOSE, "mg/dL, missing values ignored"), md=3),
            dbc.Col(metric_card("Avg BMI", IDs.Control.METRIC_BMI, "Missing values ignored"), md=3),
            dbc.Col(metric_card("Stroke cases", IDs.Control.METRIC_STROKES, "Patients with stroke = 1"), md=3),
        ],
        className="g-3 mt-1",
    )

    return dbc.Container(
        fluid=True,
        children=[
            cards,
            html.Div(id=IDs.Control.STATUS_BAR, className="sd-status-bar text-muted small mt-3"),
            html.Div(
                [build_plot_panel(view.id, view.label) for view in views],
                className="mt-3",
            ),
        ],
    )
