from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from stroke_dashboard.config.config_loader import load_config
from stroke_dashboard.core.dataset_loader import load_dataset
from stroke_dashboard.core.pipeline import FilterPipeline
from stroke_dashboard.ui.callbacks.callbacks_filters import register_filter_callbacks
from stroke_dashboard.ui.callbacks.callbacks_io import register_io_callbacks
from stroke_dashboard.ui.callbacks.callbacks_render import register_render_callbacks
from stroke_dashboard.ui.config import AppConfig
from stroke_dashboard.ui.layout.build_layout import build_layout
from stroke_dashboard.views import build_view_registry

logger = logging.getLogger(__name__)


def create_dash_app(config_path: Optional[Path | str] = None) -> Dash:
    """
    Build the Dash app.

    The dataset is loaded here, once, before the server starts. A missing file
    or missing required columns raises (DatasetLoadError / DatasetSchemaError)
    and the app never starts.
    """
    # 1) Load Config
    config = load_config(config_path)

    # 2) Load the dataset (fatal on error)
    dataset = load_dataset(config.data_path)
    if dataset.coercion_issues:
        logger.warning(
            "Dataset loaded with malformed numeric values",
            extra={
                "dataset": dataset.name,
                "n_coercion_issues": len(dataset.coercion_issues),
            },
        )

    # 3) Views + recompute pipeline (shared read-only by every session)
    registry = build_view_registry()
    pipeline = FilterPipeline(dataset, registry)

    # 4) App Context
    ctx = AppConfig(
        config=config,
        dataset=dataset,
        registry=registry,
        pipeline=pipeline,
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"dataset": dataset.name, "n_rows": dataset.n_rows, "views": registry.ids()},
    )
    return app
