from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from stroke_dashboard.core.filter_state import sanitise_filter_state
from stroke_dashboard.core.schema import ALL
from stroke_dashboard.ui.helpers import age_slider_bounds
from stroke_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from stroke_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_state_from_controls(
    ctx: AppConfig, gender: Any, age_range: Any, smoking_status: Any
) -> dict[str, Any]:
    """
    Pure helper: raw control values -> FilterState dict for the filter-state store.
    """
    state = sanitise_filter_state(ctx.dataset, gender, age_range, smoking_status)
    return state.to_dict()


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> FilterState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.GENDER_SELECT, "value"),
        Input(IDs.Control.AGE_RANGE, "value"),
        Input(IDs.Control.SMOKING_SELECT, "value"),
        prevent_initial_call=True,
    )
    def sync_filter_state_from_ui(gender, age_range, smoking_status):
        state = build_state_from_controls(ctx, gender, age_range, smoking_status)
        logger.info("filter_state_changed", extra={"filter_state": state})
        return state

    # ---------------------------------------------------------
    # Reset: controls back to "everything"
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.GENDER_SELECT, "value"),
        Output(IDs.Control.AGE_RANGE, "value"),
        Output(IDs.Control.SMOKING_SELECT, "value"),
        Input(IDs.Control.RESET_FILTERS_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(_n_clicks):
        lo, hi = age_slider_bounds(ctx.dataset)
        return ALL, [lo, hi], ALL
