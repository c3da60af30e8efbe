from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import pandas as pd
from dash import Input, Output, State, dcc
from dash.exceptions import PreventUpdate

from stroke_dashboard.core.pipeline import state_token
from stroke_dashboard.core.table import search_rows
from stroke_dashboard.ui.callbacks.callbacks_utils import state_from_store
from stroke_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from stroke_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def export_filtered_table(
    ctx: AppConfig,
    fs_data: Any,
    search: Optional[str],
    rendered_token: Optional[str],
) -> Optional[pd.DataFrame]:
    """
    Rows for the CSV export, or None if the frame on screen was rendered for a
    different FilterState than the one currently stored.

    The render callback writes its snapshot token to the render-token store;
    exporting only when that token matches keeps the file identical to the
    table the user is looking at.
    """
    state = state_from_store(ctx, fs_data)
    token = state_token(state)
    if rendered_token != token:
        logger.warning(
            "download_refused_stale_frame",
            extra={"token": token, "rendered_token": rendered_token},
        )
        return None

    table = search_rows(ctx.dataset.subset_for_state(state), search)
    logger.info(
        "download_filtered_data",
        extra={"filter_state": state.to_dict(), "token": token, "n_rows": len(table)},
    )
    return table


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Download the filtered (and searched) table as CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        State(IDs.Control.TABLE_SEARCH, "value"),
        State(IDs.Store.RENDER_TOKEN, "data"),
        prevent_initial_call=True,
    )
    def download_filtered_data(_n_clicks, fs_data, search, rendered_token):
        table = export_filtered_table(ctx, fs_data, search, rendered_token)
        if table is None:
            raise PreventUpdate
        return dcc.send_data_frame(table.to_csv, "filtered_patients.csv", index=False)
