from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from stroke_dashboard.core.dataset import PatientDataset
from stroke_dashboard.core.schema import ALL
from stroke_dashboard.ui.helpers import age_slider_bounds, age_slider_marks, get_filter_options
from stroke_dashboard.ui.ids import IDs


def build_filter_panel(dataset: PatientDataset) -> dbc.Card:
    gender_options, smoking_options = get_filter_options(dataset)
    lo, hi = age_slider_bounds(dataset)

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Gender", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.GENDER_SELECT,
                        options=gender_options,
                        value=ALL,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Label("Age range", className="form-label"),
                    dcc.RangeSlider(
                        id=IDs.Control.AGE_RANGE,
                        min=lo,
                        max=hi,
                        step=1,
                        value=[lo, hi],
                        marks=age_slider_marks(lo, hi),
                        allowCross=False,
                        tooltip={"placement": "bottom", "always_visible": False},
                        className="mb-3",
                    ),
                    html.Label("Smoking status", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.SMOKING_SELECT,
                        options=smoking_options,
                        value=ALL,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Hr(),
                    dbc.Button(
                        "Reset filters",
                        id=IDs.Control.RESET_FILTERS_BTN,
                        color="secondary",
                        size="sm",
                        outline=True,
                    ),
                ]
            ),
        ],
        className="sd-sidebar",
    )
