from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from stroke_dashboard.ui.ids import IDs
from stroke_dashboard.ui.layout.build_about_panel import build_about_panel
from stroke_dashboard.ui.layout.build_analytics_panel import build_analytics_panel
from stroke_dashboard.ui.layout.build_data_panel import build_data_panel
from stroke_dashboard.ui.layout.build_navbar import build_navbar
from stroke_dashboard.ui.layout.build_overview_panel import build_overview_panel

if TYPE_CHECKING:
    from stroke_dashboard.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    registry = ctx.registry
    overview_views = [registry.create(v) for v in ctx.overview_view_ids]
    analytics_views = [registry.create(v) for v in ctx.analytics_view_ids]

    navbar = build_navbar(ctx.config, ctx.dataset)

    return dbc.Container(
        fluid=True,
        className="sd-root",
        children=[
            navbar,

            # Per-tab store: each browser tab keeps its own FilterState, reset with the controls on reload
            dcc.Store(
                id=IDs.Store.FILTER_STATE,
                storage_type="memory",
                data=ctx.pipeline.default_state().to_dict(),
            ),
            dcc.Store(id=IDs.Store.RENDER_TOKEN, storage_type="memory"),

            dcc.Tabs(
                id=IDs.Control.PAGE_TABS,
                value="overview",
                children=[
                    dcc.Tab(
                        label="Overview",
                        value="overview",
                        children=[build_overview_panel(overview_views)],
                    ),
                    dcc.Tab(
                        label="Analytics",
                        value="analytics",
                        children=[build_analytics_panel(ctx.dataset, analytics_views)],
                    ),
                    dcc.Tab(
                        label="Data",
                        value="data",
                        children=[build_data_panel(ctx.dataset, ctx.config.page_size)],
                    ),
                    dcc.Tab(
                        label="About",
                        value="about",
                        children=[build_about_panel()],
                    ),
                ],
                className="mt-2",
            ),
        ],
    )
