from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc

from stroke_dashboard.core.base_view import BaseView
from stroke_dashboard.core.dataset import PatientDataset
from stroke_dashboard.ui.layout.build_filter_panel import build_filter_panel
from stroke_dashboard.ui.layout.build_plot_panel import build_plot_panel


def build_analytics_panel(dataset: PatientDataset, views: List[BaseView]) -> dbc.Row:
    return dbc.Row(
        [
            dbc.Col(build_filter_panel(dataset), md=3, className="mt-3"),
            dbc.Col(
                [build_plot_panel(view.id, view.label) for view in views],
                md=9,
                className="mt-3",
            ),
        ],
        className="gx-3",
    )
