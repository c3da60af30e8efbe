from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from stroke_dashboard.config.model import DashboardConfig
from stroke_dashboard.core.dataset import PatientDataset


def build_navbar(config: DashboardConfig, dataset: PatientDataset) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(config.ui_title, className="mb-0"),
                        html.Small(config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div(dataset.name, className="navbar-dataset-title fw-semibold"),
                        html.Div(
                            f"{dataset.n_rows:,} patients · {len(dataset.columns)} columns",
                            className="navbar-dataset-subtitle text-muted",
                        ),
                    ],
                    className="ms-auto text-end",
                    style={"marginRight": "24px"},
                ),
            ],
        ),
        dark=False,
        className="shadow-sm sd-navbar",
    )
