from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from stroke_dashboard.core.dataset import PatientDataset
from stroke_dashboard.ui.helpers import patient_table
from stroke_dashboard.ui.ids import IDs


def build_data_panel(dataset: PatientDataset, page_size: int) -> dbc.Card:
    """
    Data page: free-text search over the filtered table plus the paginated grid.
    """
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Patient records"),
                        html.Span(id=IDs.Control.TABLE_ROW_COUNT, className="text-muted ms-3 small"),
                        dbc.Button(
                            "Download filtered data (CSV)",
                            id=IDs.Control.DOWNLOAD_DATA_BTN,
                            color="secondary",
                            size="sm",
                            className="ms-auto",
                        ),
                        dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dbc.Input(
                        id=IDs.Control.TABLE_SEARCH,
                        type="search",
                        placeholder="Search across all columns...",
                        debounce=True,
                        className="mb-3",
                    ),
                    patient_table(IDs.Control.DATA_TABLE, dataset.columns, page_size=page_size),
                ]
            ),
        ],
        className="sd-maincard mt-3",
    )
