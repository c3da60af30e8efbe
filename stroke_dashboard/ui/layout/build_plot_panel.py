from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from stroke_dashboard.ui.ids import graph_id


def build_plot_panel(view_id: str, title: str, height: str = "420px") -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong(title), className="p-2"),
            dbc.CardBody(
                dcc.Loading(
                    type="default",
                    children=dcc.Graph(
                        id=graph_id(view_id),
                        style={"height": height},
                        config={"responsive": True, "displaylogo": False},
                    ),
                ),
                className="sd-main-body",
            ),
        ],
        className="sd-maincard mb-3",
    )
